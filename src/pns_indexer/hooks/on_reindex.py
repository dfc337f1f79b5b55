from pathlib import Path

from dipdup.context import HookContext

from pns_indexer.labels import seed_labels


async def on_reindex(
    ctx: HookContext,
) -> None:
    await ctx.execute_sql('on_reindex')

    labels_path = ctx.config.custom.get('labels_path')
    if not labels_path:
        ctx.logger.info('`custom.labels_path` is not set, names will be resolved from controller events only')
        return
    await seed_labels(Path(labels_path))

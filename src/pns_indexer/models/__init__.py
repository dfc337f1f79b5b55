from dipdup import fields
from dipdup.models import Model


class Account(Model):
    id = fields.CharField(max_length=42, primary_key=True)

    domains: fields.ReverseRelation['Domain']
    owned_domains: fields.ReverseRelation['Domain']
    registrations: fields.ReverseRelation['Registration']


class Label(Model):
    id = fields.CharField(max_length=66, primary_key=True)
    name = fields.TextField()


class Domain(Model):
    id = fields.CharField(max_length=66, primary_key=True)
    labelhash = fields.CharField(max_length=66, null=True)
    parent = fields.CharField(max_length=66, null=True, db_index=True)
    label_name = fields.TextField(null=True)
    name = fields.TextField(null=True)
    owner: fields.ForeignKeyField[Account] = fields.ForeignKeyField(
        'models.Account',
        'owned_domains',
        null=True,
    )
    registrant: fields.ForeignKeyField[Account] = fields.ForeignKeyField(
        'models.Account',
        'domains',
        null=True,
    )
    expiry_date = fields.BigIntField(null=True)

    registrations: fields.ReverseRelation['Registration']


class Registration(Model):
    id = fields.CharField(max_length=66, primary_key=True)
    domain: fields.ForeignKeyField[Domain] = fields.ForeignKeyField('models.Domain', 'registrations')
    registration_date = fields.BigIntField()
    expiry_date = fields.BigIntField()
    registrant: fields.ForeignKeyField[Account] = fields.ForeignKeyField('models.Account', 'registrations')
    label_name = fields.TextField(null=True)
    cost = fields.DecimalField(max_digits=78, decimal_places=0, null=True)


class Referrer(Model):
    id = fields.CharField(max_length=42, primary_key=True)
    count = fields.IntField(default=0)
    commission = fields.DecimalField(max_digits=78, decimal_places=0, default=0)


class Blacklist(Model):
    id = fields.CharField(max_length=42, primary_key=True)
    banned = fields.BooleanField(default=False)


# NOTE: Audit records below are write-once and keep plain string references
class NameRegistered(Model):
    id = fields.CharField(max_length=80, primary_key=True)
    registration = fields.CharField(max_length=66, db_index=True)
    registrant = fields.CharField(max_length=42)
    expiry_date = fields.BigIntField()
    block_number = fields.BigIntField()
    transaction_id = fields.CharField(max_length=66)


class NameRenewed(Model):
    id = fields.CharField(max_length=80, primary_key=True)
    registration = fields.CharField(max_length=66, db_index=True)
    expiry_date = fields.BigIntField()
    block_number = fields.BigIntField()
    transaction_id = fields.CharField(max_length=66)


class NameTransferred(Model):
    id = fields.CharField(max_length=80, primary_key=True)
    registration = fields.CharField(max_length=66, db_index=True)
    new_owner = fields.CharField(max_length=42)
    block_number = fields.BigIntField()
    transaction_id = fields.CharField(max_length=66)


class BlacklistChanged(Model):
    id = fields.CharField(max_length=80, primary_key=True)
    account = fields.CharField(max_length=42, db_index=True)
    banned = fields.BooleanField()
    block_number = fields.BigIntField()
    transaction_id = fields.CharField(max_length=66)


class ReferralFeeReceived(Model):
    id = fields.CharField(max_length=80, primary_key=True)
    referrer = fields.CharField(max_length=42, db_index=True)
    amount = fields.DecimalField(max_digits=78, decimal_places=0)
    block_number = fields.BigIntField()
    transaction_id = fields.CharField(max_length=66)

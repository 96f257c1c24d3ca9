"""Account-related Marshmallow schemas."""

from __future__ import annotations

from marshmallow import Schema, fields, validate

PASSWORD_LENGTH = validate.Length(min=8, max=128)
NAME = [
    validate.Length(min=1, max=100),
    validate.Regexp(r"^\s*\S", error="Name must not be blank."),
]


class RegisterSchema(Schema):
    """Input payload for account registration."""

    name = fields.String(required=True, validate=NAME)
    email = fields.Email(required=True, validate=validate.Length(max=254))
    password = fields.String(required=True, validate=PASSWORD_LENGTH)


class AccountSchema(Schema):
    """Public account representation; the password hash is never dumped."""

    id = fields.String(required=True)
    name = fields.String(required=True)
    email = fields.Email(required=True)
    created_at = fields.DateTime(allow_none=True)
    updated_at = fields.DateTime(allow_none=True)


class RenameSchema(Schema):
    name = fields.String(required=True, validate=NAME)


class ChangeEmailSchema(Schema):
    email = fields.Email(required=True, validate=validate.Length(max=254))


class ChangePasswordSchema(Schema):
    """Input payload for a password change of the authenticated account."""

    old_password = fields.String(required=True, validate=validate.Length(min=1, max=128))
    new_password = fields.String(required=True, validate=PASSWORD_LENGTH)

"""Schemas for the lotto draw API."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, validate


class DrawRecordSchema(Schema):
    round = fields.Integer(required=True)
    date = fields.String(required=True)
    numbers = fields.List(
        fields.Integer(validate=validate.Range(min=1, max=45)),
        required=True,
        validate=validate.Length(equal=6),
    )
    bonus = fields.Integer(required=True, validate=validate.Range(min=1, max=45))


class RoundQuerySchema(Schema):
    class Meta:
        unknown = EXCLUDE

    round = fields.Integer(
        required=True,
        strict=False,
        validate=validate.Range(min=1, error="Round must be positive"),
        error_messages={"required": "round is required", "invalid": "round must be an integer"},
    )


class MissingQuerySchema(Schema):
    """Analysis options. Range bounds are validated by the draw service."""

    class Meta:
        unknown = EXCLUDE

    weeks = fields.Integer(required=False, load_default=10, validate=validate.Range(min=1))
    min_streak = fields.Integer(required=False, load_default=10, validate=validate.Range(min=1))


class MissingStreakSchema(Schema):
    number = fields.Integer()
    streak = fields.Integer()


class MissingAnalysisResponseSchema(Schema):
    draws_used = fields.Integer()
    weeks = fields.Integer()
    missing = fields.List(fields.Integer())
    streaks = fields.List(fields.Nested(MissingStreakSchema))

import logging
from typing import Any, Mapping

from core.environment.config import Schema
from core.exceptions import UnknownSchemaException
from explorer.entities import ValidationResult


class SchemaValidator:
    """
    Service checking records for required fields.

    Violations are collected, never raised: every missing field of every
    record ends up in the result.

    Parameters
    ----------
    schemas : Mapping[str, Schema]
        Configured schemas, addressable by name
    logger : logging.Logger
        Logger instance
    """

    def __init__(self, schemas: Mapping[str, Schema], logger: logging.Logger):
        self.schemas = dict(schemas)
        self.logger = logger

    def resolve(self, schema: Schema | str) -> Schema:
        """
        Get schema by name, or pass a schema through.

        Parameters
        ----------
        schema : Schema | str
            Schema or configured schema name

        Returns
        -------
        Schema
            Resolved schema

        Raises
        ------
        UnknownSchemaException
            If the name is not configured
        """
        if isinstance(schema, Schema):
            return schema
        if schema not in self.schemas:
            raise UnknownSchemaException(f"Unknown schema: {schema}")
        return self.schemas[schema]

    def validate(self, record: Any, schema: Schema | str) -> ValidationResult:
        """
        Validate one record.

        Parameters
        ----------
        record : Any
            Decoded JSON value; anything but a mapping lacks every field
        schema : Schema | str
            Schema or configured schema name

        Returns
        -------
        ValidationResult
            One ``Missing required field: <key>`` per absent key, in schema order
        """
        errors = self._missing_fields(record, self.resolve(schema))
        if errors:
            self.logger.debug(f"Schema validation errors: {errors}")
        return ValidationResult(errors=tuple(errors))

    def validate_array(self, records: Any, schema: Schema | str) -> ValidationResult:
        """
        Validate every element of an array independently.

        Parameters
        ----------
        records : Any
            Decoded JSON value expected to be an array
        schema : Schema | str
            Schema or configured schema name applied to each element

        Returns
        -------
        ValidationResult
            Element errors prefixed with ``Item <index>: ``, in index order;
            a single ``Response is not an array`` for non-array input
        """
        resolved = self.resolve(schema)
        if not isinstance(records, (list, tuple)):
            self.logger.debug("Schema validation errors: response is not an array")
            return ValidationResult(errors=("Response is not an array",))

        errors = [
            f"Item {index}: {error}"
            for index, record in enumerate(records)
            for error in self._missing_fields(record, resolved)
        ]
        if errors:
            self.logger.debug(f"Schema validation errors: {errors}")
        return ValidationResult(errors=tuple(errors))

    @staticmethod
    def _missing_fields(record: Any, schema: Schema) -> list[str]:
        present = record if isinstance(record, Mapping) else {}
        return [
            f"Missing required field: {field}"
            for field in schema.required
            if field not in present
        ]

"""Record validation utilities for the token top-up processor."""
import logging

from models.schemas import USER_SCHEMA, COMPANY_SCHEMA

logger = logging.getLogger('debug')


def valid_data(data, schema):
    """Check a decoded JSON record against a field schema.

    Args:
        data: Decoded JSON value to check
        schema: Mapping of field name to FieldType

    Returns:
        bool: True if data is a mapping with exactly the schema's fields,
        each holding a value of the required type
    """
    return (
        isinstance(data, dict)
        and len(data) == len(schema)
        and all(
            key in data and field_type.matches(data[key])
            for key, field_type in schema.items()
        )
    )


def _valid_records(records, schema, label):
    if not isinstance(records, list):
        logger.debug(f"Expected a list of {label} records, got {type(records).__name__}")
        return False

    for index, record in enumerate(records):
        if not valid_data(record, schema):
            logger.debug(f"Invalid {label} record at index {index}")
            return False
    return True


def valid_users(users):
    """Check that users is a list of user records.

    Returns:
        bool: True if every element matches the user schema
    """
    return _valid_records(users, USER_SCHEMA, 'user')


def valid_companies(companies):
    """Check that companies is a list of company records.

    Returns:
        bool: True if every element matches the company schema
    """
    return _valid_records(companies, COMPANY_SCHEMA, 'company')

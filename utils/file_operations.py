"""File operation utilities for the token top-up processor."""
import json
import logging

# Get loggers
app_logger = logging.getLogger('app')
logger = logging.getLogger('debug')


def load_json_file(file_path):
    """Load and parse a JSON file.

    A file that cannot be read or parsed yields an empty mapping, which the
    record validators reject.

    Args:
        file_path: Path to the JSON file

    Returns:
        The decoded JSON value, or {} on failure
    """
    logger.debug(f"Reading file content: {file_path}")
    try:
        with open(file_path, 'r', encoding='utf-8') as file:
            return json.load(file)
    except (json.JSONDecodeError, UnicodeDecodeError) as je:
        app_logger.error(f"Error parsing JSON file `{file_path}`: {str(je)}")
        return {}
    except OSError as e:
        app_logger.error(f"Error reading JSON file `{file_path}`: {str(e)}")
        return {}


def mask_email(email):
    """Mask the local part of an email address, keeping its first character."""
    if not isinstance(email, str) or '@' not in email:
        return email
    local, _, domain = email.partition('@')
    return f"{local[:1]}{'*' * max(len(local) - 1, 0)}@{domain}"


def sanitize_data_for_logging(data):
    """Create a copy of data with email addresses masked for safe logging.

    Args:
        data: Data structure to sanitize

    Returns:
        Data structure with email addresses masked
    """
    if isinstance(data, list):
        return [sanitize_data_for_logging(item) for item in data]

    if not isinstance(data, dict):
        return data

    sanitized = {}
    for key, value in data.items():
        if key == 'email':
            sanitized[key] = mask_email(value)
        else:
            sanitized[key] = sanitize_data_for_logging(value)
    return sanitized

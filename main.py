# main.py
"""Main entry point for the token top-up processor."""
import os
import sys
import logging
import traceback

# Application modules
import config
from logger import setup_logging
from models.schemas import Company, User
from handlers.top_up import compute_top_ups
from handlers.report_writer import write_report
from utils.validators import valid_users, valid_companies
from utils.file_operations import load_json_file, sanitize_data_for_logging

# Get loggers
app_logger = logging.getLogger('app')
error_logger = logging.getLogger('error')
debug_logger = logging.getLogger('debug')


def run_top_up(users_path=None, companies_path=None, output_path=None, indent_size=None):
    """Load, validate and top up users, then write the report.

    Args:
        users_path: Path to the users JSON file
        companies_path: Path to the companies JSON file
        output_path: Path of the report to write
        indent_size: Number of spaces per report indentation level

    Returns:
        int: Process exit code, 0 on success and 1 on invalid data
    """
    users_path = users_path or config.USERS_FILE
    companies_path = companies_path or config.COMPANIES_FILE
    output_path = output_path or config.OUTPUT_FILENAME
    indent_size = config.INDENT_SIZE if indent_size is None else indent_size

    users_data = load_json_file(users_path)
    companies_data = load_json_file(companies_path)
    if debug_logger.isEnabledFor(logging.DEBUG):
        debug_logger.debug(f"Loaded users: {sanitize_data_for_logging(users_data)}")

    if not valid_users(users_data):
        app_logger.error("Invalid user data")
        return 1

    if not valid_companies(companies_data):
        app_logger.error("Invalid company data")
        return 1

    # Records are already validated, build the models without checking again
    users = [User.model_construct(**user) for user in users_data]
    companies = [Company.model_construct(**company) for company in companies_data]
    debug_logger.debug(f"Validated {len(users)} users and {len(companies)} companies")

    reports = compute_top_ups(users, companies)
    debug_logger.debug(f"Computed top ups for {len(reports)} companies")

    write_report(reports, output_path, indent_size)
    return 0


def main():
    """Run the top up batch with logging and error handling set up."""
    loggers = setup_logging()
    loggers['debug'].debug(f"Working directory: {os.getcwd()}")

    try:
        return run_top_up()
    except Exception as e:
        stack_trace = traceback.format_exc()
        loggers['error'].critical(f"Unhandled exception: {str(e)}\n{stack_trace}")
        return 1


if __name__ == "__main__":
    exit_code = main()
    sys.exit(exit_code)

"""Plain text top up report for the token top-up processor."""
import logging

# Get loggers
app_logger = logging.getLogger('app')
debug_logger = logging.getLogger('debug')


def indent_string(string, indent_count, indent_size):
    """Prefix a string with indent_count levels of indent_size spaces."""
    return f"{' ' * indent_size * indent_count}{string}"


def _format_email_list(records, indent_level, indent_size):
    """Render the lines for a list of top up records.

    Args:
        records: TopUpRecord values in report order
        indent_level: Indentation level of every line
        indent_size: Number of spaces per indentation level

    Returns:
        list: Lines without trailing newlines
    """
    lines = []
    for record in records:
        user = record.user
        lines.extend([
            f"{user.last_name}, {user.first_name}, {user.email}",
            f"  Previous token balance: {record.previous_token_balance}",
            f"  New token balance: {record.new_token_balance}",
        ])
    return [indent_string(line, indent_level, indent_size) for line in lines]


def format_report(reports, indent_size):
    """Render company reports as plain text.

    Every company block ends with a blank line, including the last one.

    Args:
        reports: CompanyReport values in output order
        indent_size: Number of spaces per indentation level

    Returns:
        str: The report text
    """
    lines = []
    for report in reports:
        company = report.company
        lines.append(f"Company ID: {company.id}")
        lines.append(f"Company Name: {company.name}")
        lines.append("Users emailed:")
        lines.extend(_format_email_list(report.users_emailed, 1, indent_size))
        lines.append("Users not emailed:")
        lines.extend(_format_email_list(report.users_not_emailed, 1, indent_size))
        lines.append(f"Total top ups: {report.total_top_ups}")
        lines.append("")
    return "".join(f"{line}\n" for line in lines)


def write_report(reports, destination, indent_size):
    """Write the report to destination, replacing any existing file.

    Args:
        reports: CompanyReport values in output order
        destination: Path of the report file
        indent_size: Number of spaces per indentation level
    """
    content = format_report(reports, indent_size)
    debug_logger.debug(f"Writing {len(reports)} company reports to {destination}")

    with open(destination, 'w', encoding='utf-8', newline='\n') as file:
        file.write(content)

    app_logger.info(f"Wrote top up data to `{destination}`")

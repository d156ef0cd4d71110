"""Top up notification emails for the token top-up processor."""
import logging

from utils.file_operations import mask_email

# Get loggers
debug_logger = logging.getLogger('debug')


def send_top_up_email(email_address, new_token_balance):
    """Notify a user that their token balance was topped up.

    No email is delivered yet; the notification is only logged.

    Args:
        email_address: Address of the user to notify
        new_token_balance: Token balance after the top up
    """
    debug_logger.debug(
        f"Top up email for {mask_email(email_address)}: new token balance {new_token_balance}"
    )

"""Token top up computation for the token top-up processor."""
import logging
from collections import Counter
from itertools import groupby
from typing import Callable, Dict, Iterable, List

from models.schemas import Company, CompanyReport, TopUpRecord, User
from handlers.email_handler import send_top_up_email

# Get loggers
app_logger = logging.getLogger('app')
debug_logger = logging.getLogger('debug')


def companies_by_id(companies: Iterable[Company]) -> Dict[int, Company]:
    """Index companies by id. The last company wins when ids repeat."""
    companies = list(companies)
    duplicates = sorted(
        company_id
        for company_id, count in Counter(company.id for company in companies).items()
        if count > 1
    )
    if duplicates:
        app_logger.warning(f"Duplicate company ids, using the last entry for: {duplicates}")
    return {company.id: company for company in companies}


def eligible_users(users: Iterable[User], companies: Dict[int, Company]) -> List[User]:
    """Return active users of known companies sorted by last name, first name and email."""
    return sorted(
        (user for user in users if user.active_status and user.company_id in companies),
        key=User.sort_key,
    )


def top_up_user(user: User, company: Company) -> TopUpRecord:
    """Build the top up record for one user without touching the original."""
    previous_token_balance = user.tokens
    new_token_balance = previous_token_balance + company.top_up
    return TopUpRecord(
        user=user.model_copy(update={'tokens': new_token_balance}),
        previous_token_balance=previous_token_balance,
        new_token_balance=new_token_balance,
    )


def top_up_company(
    company: Company,
    users: List[User],
    notifier: Callable[[str, int], None] = send_top_up_email,
) -> CompanyReport:
    """Top up every user of one company, in the given order.

    Users are emailed only when both the company and the user have email
    enabled.

    Args:
        company: The company paying for the top up
        users: The company's eligible users, already sorted
        notifier: Called with (email, new_token_balance) for emailed users

    Returns:
        CompanyReport: Records split by email status and the top up total
    """
    users_emailed = []
    users_not_emailed = []

    for user in users:
        record = top_up_user(user, company)
        if company.email_status and user.email_status:
            notifier(user.email, record.new_token_balance)
            users_emailed.append(record)
        else:
            users_not_emailed.append(record)

    return CompanyReport(
        company=company,
        users_emailed=tuple(users_emailed),
        users_not_emailed=tuple(users_not_emailed),
        total_top_ups=company.top_up * len(users),
    )


def compute_top_ups(
    users: Iterable[User],
    companies: Iterable[Company],
    notifier: Callable[[str, int], None] = send_top_up_email,
) -> List[CompanyReport]:
    """Compute the top ups of all eligible users, grouped by company.

    Args:
        users: Validated user records
        companies: Validated company records
        notifier: Called once per emailed user

    Returns:
        list: One CompanyReport per company with eligible users, in ascending
        company id order
    """
    lookup = companies_by_id(companies)
    sorted_users = eligible_users(users, lookup)
    debug_logger.debug(f"{len(sorted_users)} eligible users across {len(lookup)} companies")

    # Re-sorting by company id is stable, so each group keeps the name order
    by_company = sorted(sorted_users, key=lambda user: user.company_id)

    return [
        top_up_company(lookup[company_id], list(group), notifier)
        for company_id, group in groupby(by_company, key=lambda user: user.company_id)
    ]

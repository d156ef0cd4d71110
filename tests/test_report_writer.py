"""Tests for the plain text top up report."""

from conftest import make_company, make_user
from handlers.report_writer import _format_email_list, format_report, write_report
from handlers.top_up import compute_top_ups
from models.schemas import Company, User

ACME_REPORT = (
    "Company ID: 1\n"
    "Company Name: Acme\n"
    "Users emailed:\n"
    "    Lee, Ann, a@x.com\n"
    "      Previous token balance: 5\n"
    "      New token balance: 15\n"
    "Users not emailed:\n"
    "    Ng, Bo, b@x.com\n"
    "      Previous token balance: 20\n"
    "      New token balance: 30\n"
    "Total top ups: 20\n"
    "\n"
)


def acme_reports(acme_users, acme_companies):
    return compute_top_ups(
        [User(**user) for user in acme_users],
        [Company(**company) for company in acme_companies],
        lambda email, balance: None,
    )


def test_format_report_acme(acme_users, acme_companies):
    reports = acme_reports(acme_users, acme_companies)
    assert format_report(reports, 4) == ACME_REPORT


def test_format_report_empty():
    assert format_report([], 4) == ""


def test_format_report_separates_companies_with_blank_lines():
    users = [User(**make_user(company_id=1)), User(**make_user(id=2, company_id=2))]
    companies = [
        Company(**make_company(id=1)),
        Company(**make_company(id=2, name="Beta", top_up=7, email_status=False)),
    ]
    reports = compute_top_ups(users, companies, lambda email, balance: None)

    text = format_report(reports, 4)

    assert text.endswith("Total top ups: 7\n\n")
    assert "Total top ups: 10\n\nCompany ID: 2\nCompany Name: Beta\n" in text
    assert "Users emailed:\nUsers not emailed:\n    Lee, Ann, a@x.com\n" in text


def test_format_email_list_uses_indent_size(acme_users, acme_companies):
    reports = acme_reports(acme_users, acme_companies)

    lines = _format_email_list(reports[0].users_emailed, 1, 2)

    assert lines == [
        "  Lee, Ann, a@x.com",
        "    Previous token balance: 5",
        "    New token balance: 15",
    ]


def test_write_report_overwrites_destination(tmp_path, caplog, acme_users, acme_companies):
    destination = tmp_path / "output.txt"
    destination.write_text("stale contents\n", encoding="utf-8")
    reports = acme_reports(acme_users, acme_companies)

    with caplog.at_level("INFO", logger="app"):
        write_report(reports, str(destination), 4)

    assert destination.read_text(encoding="utf-8") == ACME_REPORT
    assert f"Wrote top up data to `{destination}`" in caplog.text

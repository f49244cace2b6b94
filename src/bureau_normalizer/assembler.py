"""Assemble the AI context payload from one raw bureau document."""

import logging
from typing import Any, Mapping, Optional

from bureau_normalizer.models.payload import (
    AiContextPayload,
    FinancialSummary,
    Identification,
    Location,
    NegativeDetails,
)
from bureau_normalizer.parsing import constants as c
from bureau_normalizer.parsing.access import dig, dig_mapping
from bureau_normalizer.parsing.blocks import NormalizedRecord, unify_block
from bureau_normalizer.parsing.scalars import is_present, parse_monetary_value, parse_quantity
from bureau_normalizer.parsing.sections import (
    BANKRUPTCY,
    CIVIL_ACTIONS,
    CORPORATE_PARTICIPATION,
    DEBTS,
    PROTESTS,
    RISK_SCORE,
    SectionSpec,
)

logger = logging.getLogger(__name__)


def report_root(document: Any) -> Mapping[str, Any]:
    """Locate the ACERTA node; any missing or non-object segment yields {}."""
    root = dig_mapping(document, *c.ROOT_PATH)
    if not root:
        logger.debug("No report node at %s", " -> ".join(c.ROOT_PATH))
    return root


def build_address(location: Mapping[str, Any]) -> Optional[str]:
    """'<type> <name>, <number>' from whatever parts are present; None when all are absent."""
    # Absent parts leave no stray separators: "RUA X", not "RUA X,"; None, not ",".
    street = " ".join(
        str(location[k]).strip()
        for k in (c.STREET_TYPE, c.STREET_NAME)
        if is_present(location.get(k))
    ).strip()
    number = location.get(c.STREET_NUMBER)
    number = str(number).strip() if is_present(number) else ""
    if street and number:
        return f"{street}, {number}"
    return street or number or None


def build_identification(report: Mapping[str, Any]) -> Identification:
    ident = dig_mapping(report, c.IDENTIFICATION)
    return Identification(
        name=ident.get(c.NAME),
        document=ident.get(c.DOCUMENT),
        birth_date=ident.get(c.BIRTH_DATE),
        tax_status=ident.get(c.TAX_STATUS),
        consumer_status=dig(report, c.CONSUMER_STATUS, c.CONSUMER_STATUS_MESSAGE),
    )


def build_location(report: Mapping[str, Any]) -> Location:
    loc = dig_mapping(report, c.LOCATION)
    return Location(
        address=build_address(loc),
        city=loc.get(c.CITY),
        state=loc.get(c.STATE),
        zip_code=loc.get(c.ZIP_CODE),
    )


def build_financial_summary(report: Mapping[str, Any]) -> FinancialSummary:
    """
    Sum principal-debtor and guarantor exposure into single debt figures;
    protest, civil action and bounced check counters are read as-is.
    """
    debts = dig_mapping(report, c.DEBT_SUMMARY)
    protests = dig_mapping(report, c.PROTEST_SUMMARY)
    return FinancialSummary(
        total_debts_qty=(
            parse_quantity(debts.get(c.DEBT_QTY_PRINCIPAL))
            + parse_quantity(debts.get(c.DEBT_QTY_GUARANTOR))
        ),
        total_debts_value=(
            parse_monetary_value(debts.get(c.DEBT_VALUE_PRINCIPAL))
            + parse_monetary_value(debts.get(c.DEBT_VALUE_GUARANTOR))
        ),
        protests_qty=parse_quantity(protests.get(c.PROTEST_QTY)),
        protests_value=parse_monetary_value(protests.get(c.PROTEST_VALUE)),
        legal_actions_qty=parse_quantity(
            dig(report, c.CIVIL_ACTION_SUMMARY, c.CIVIL_ACTION_QTY)
        ),
        bounced_checks_qty=parse_quantity(
            dig(report, c.BOUNCED_CHECK_SUMMARY, c.BOUNCED_CHECK_QTY)
        ),
    )


def extract_section(report: Mapping[str, Any], section: SectionSpec) -> list[NormalizedRecord]:
    """Unify one repeated-record section found directly under the report node."""
    return unify_block(report.get(section.anchor), section.data_key, section.fields)


def clean_credit_data(document: Any) -> AiContextPayload:
    """
    Normalize one raw bureau response into an AiContextPayload.

    Total over any JSON value: absent or oddly shaped nodes degrade to empty
    lists and None scalars instead of raising.
    """
    report = report_root(document)
    return AiContextPayload(
        identification=build_identification(report),
        location=build_location(report),
        financial_summary=build_financial_summary(report),
        risk_score=extract_section(report, RISK_SCORE),
        negative_details=NegativeDetails(
            debts=extract_section(report, DEBTS),
            protests=extract_section(report, PROTESTS),
            civil_actions=extract_section(report, CIVIL_ACTIONS),
            bankruptcy=extract_section(report, BANKRUPTCY),
        ),
        corporate_participation=extract_section(report, CORPORATE_PARTICIPATION),
    )

"""GST tax breakup - per-rate CGST/SGST/IGST split of line item tax"""

from decimal import Decimal
from typing import Dict, Iterable, List

from ledger_gateway.domain.models import (
    LineItemTotals,
    TaxBreakupRow,
    TaxBreakupTotals,
    TransactionLineItem,
)
from ledger_gateway.utils.number_utils import ZERO, to_amount

TWO = Decimal("2")


def split_gst(tax_total: Decimal, is_inter_state: bool) -> tuple[Decimal, Decimal, Decimal]:
    """
    Split a tax amount into (cgst, sgst, igst).

    Inter-state supply is all IGST; intra-state is half CGST, half SGST.
    The two are never mixed.
    """
    if is_inter_state:
        return ZERO, ZERO, tax_total
    half = tax_total / TWO
    return half, half, ZERO


def compute_tax_breakup(
    line_items: Iterable[TransactionLineItem],
    is_inter_state: bool,
    lenient: bool = False,
) -> List[TaxBreakupRow]:
    """
    Group line items by tax rate and split each group's tax.

    A missing rate groups as 0%, a missing tax amount counts as 0. Rows come
    out in the order each rate first appears. Tax is aggregated, never
    recomputed from rate x amount.

    Raises:
        MalformedInputError: amount, rate or tax is not numeric (unless lenient)
    """
    # dict keeps insertion order; Decimal("18") and Decimal("18.00") hash equal
    groups: Dict[Decimal, List[Decimal]] = {}

    for item in line_items:
        rate = to_amount(item.tax_rate, "tax_rate", lenient)
        amount = to_amount(item.amount, "amount", lenient)
        tax = to_amount(item.tax_amount, "tax_amount", lenient)

        group = groups.setdefault(rate, [ZERO, ZERO])
        group[0] += amount
        group[1] += tax

    rows = []
    for rate, (taxable_amount, tax_total) in groups.items():
        cgst, sgst, igst = split_gst(tax_total, is_inter_state)
        rows.append(
            TaxBreakupRow(
                rate=rate,
                taxable_amount=taxable_amount,
                cgst=cgst,
                sgst=sgst,
                igst=igst,
                total=tax_total,
            )
        )

    return rows


def summarize_tax_breakup(rows: Iterable[TaxBreakupRow]) -> TaxBreakupTotals:
    """Totals row under the breakup table"""
    totals = TaxBreakupTotals(
        taxable_amount=ZERO,
        cgst=ZERO,
        sgst=ZERO,
        igst=ZERO,
        total=ZERO,
    )
    for row in rows:
        totals.taxable_amount += row.taxable_amount
        totals.cgst += row.cgst
        totals.sgst += row.sgst
        totals.igst += row.igst
        totals.total += row.total
    return totals


def calculate_line_item_totals(
    line_items: Iterable[TransactionLineItem],
    lenient: bool = False,
) -> LineItemTotals:
    """Pre-tax total, tax total and grand total for a transaction"""
    total_amount = ZERO
    total_tax_amount = ZERO

    for item in line_items:
        total_amount += to_amount(item.amount, "amount", lenient)
        total_tax_amount += to_amount(item.tax_amount, "tax_amount", lenient)

    return LineItemTotals(
        total_amount=total_amount,
        total_tax_amount=total_tax_amount,
        grand_total=total_amount + total_tax_amount,
    )

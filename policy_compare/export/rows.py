"""Field rows shared by the on-screen table and both export formats."""

from collections.abc import Sequence
from dataclasses import dataclass

import pandas as pd

from policy_compare.comparison.models import ComparisonResult, ExtractedPolicyRecord

EXCEL_LABELS = (
    "Poliçe Türü",
    "Prim Tutarı",
    "Sigorta Bedeli",
    "Muafiyet",
    "Önemli Limitler",
    "Avantajlar",
    "Dezavantajlar",
)
PDF_LABELS = (
    "Police Turu",
    "Fiyat",
    "Teminat",
    "Muafiyet",
    "Limitler",
    "Avantajlar",
    "Eksiler",
)
SCREEN_LABELS = (
    "Poliçe Türü",
    "Prim Tutarı (Fiyat)",
    "Sigorta Bedeli",
    "Muafiyet",
    "Önemli Limitler",
    "Avantajlar",
    "Dikkat Edilmesi Gerekenler",
)


@dataclass(frozen=True)
class ListFormat:
    """How list items are joined inside one cell."""

    separator: str
    prefix: str = ""

    def lines(self, items: Sequence[str]) -> list[str]:
        """One display line per item; ``"\n".join(lines)`` equals ``join``."""
        if not items:
            return []
        marker = self.separator.removeprefix("\n")
        return [self.prefix + items[0], *(marker + item for item in items[1:])]

    def join(self, items: Sequence[str]) -> str:
        return "\n".join(self.lines(items))


PLAIN_LISTS = (ListFormat("\n"), ListFormat("\n"), ListFormat("\n"))
PDF_LISTS = (ListFormat("\n• "), ListFormat("\n+ "), ListFormat("\n- "))
SCREEN_LISTS = (
    ListFormat("\n• ", "• "),
    ListFormat("\n✓ ", "✓ "),
    ListFormat("\n⚠ ", "⚠ "),
)


def format_amount(value: float) -> str:
    """Format a number with Turkish grouping: 12500 -> '12.500', 0.5 -> '0,5'."""
    rounded = round(float(value), 3)
    integer, _, fraction = f"{abs(rounded):.3f}".partition(".")
    grouped = f"{int(integer):,}".replace(",", ".")
    fraction = fraction.rstrip("0")
    sign = "-" if rounded < 0 else ""
    return f"{sign}{grouped},{fraction}" if fraction else f"{sign}{grouped}"


def format_premium(policy: ExtractedPolicyRecord) -> str:
    return f"{format_amount(policy.premium_amount)} {policy.currency}".strip()


def comparison_cells(
    result: ComparisonResult,
    labels: Sequence[str] = EXCEL_LABELS,
    list_formats: tuple[ListFormat, ListFormat, ListFormat] = PLAIN_LISTS,
) -> list[tuple[str, list[list[str]]]]:
    """Seven (label, cells) pairs; each cell is its lines, one per list item."""
    limits_format, pros_format, cons_format = list_formats
    policies = result.policies
    columns = [
        [[p.policy_type] for p in policies],
        [[format_premium(p)] for p in policies],
        [[p.coverage_amount] for p in policies],
        [[p.deductible] for p in policies],
        [limits_format.lines(p.limits) for p in policies],
        [pros_format.lines(p.pros) for p in policies],
        [cons_format.lines(p.cons) for p in policies],
    ]
    return list(zip(labels, columns, strict=True))


def comparison_rows(
    result: ComparisonResult,
    labels: Sequence[str] = EXCEL_LABELS,
    list_formats: tuple[ListFormat, ListFormat, ListFormat] = PLAIN_LISTS,
) -> list[list[str]]:
    """Seven rows, each a label followed by one cell per policy."""
    return [
        [label, *("\n".join(lines) for lines in cells)]
        for label, cells in comparison_cells(result, labels, list_formats)
    ]


def company_headers(result: ComparisonResult) -> list[str]:
    """Company names, suffixed with an ordinal when the same name repeats."""
    seen: dict[str, int] = {}
    headers: list[str] = []
    for policy in result.policies:
        count = seen.get(policy.company_name, 0) + 1
        seen[policy.company_name] = count
        headers.append(policy.company_name if count == 1 else f"{policy.company_name} ({count})")
    return headers


def comparison_table(result: ComparisonResult) -> pd.DataFrame:
    """On-screen detail table: one row per field, one column per policy."""
    rows = comparison_rows(result, SCREEN_LABELS, SCREEN_LISTS)
    return pd.DataFrame(
        [row[1:] for row in rows],
        index=[row[0] for row in rows],
        columns=company_headers(result),
    )

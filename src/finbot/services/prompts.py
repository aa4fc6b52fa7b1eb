"""Prompt text for the assistant: persona prompt and financial snapshot."""

import math
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from finbot.domain.views import FinancialSummary

BANNER = "═" * 55

_WEEKDAYS_ID = ["Senin", "Selasa", "Rabu", "Kamis", "Jumat", "Sabtu", "Minggu"]
_MONTHS_ID = [
    "Januari", "Februari", "Maret", "April", "Mei", "Juni",
    "Juli", "Agustus", "September", "Oktober", "November", "Desember",
]

_TREND_EMOJI = {"up": "📈", "down": "📉"}


def format_currency(amount: Union[Decimal, int, float]) -> str:
    """
    Format an amount as Rupiah the way the id-ID locale does.

    Dots group thousands, a comma separates at most three fraction digits,
    and trailing fraction zeros are dropped: Rp 1.500.000, Rp 12.345,5.
    """
    value = Decimal(str(amount)).quantize(Decimal("0.001"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    integer, _, fraction = f"{abs(value):f}".partition(".")
    grouped = f"{int(integer):,}".replace(",", ".")
    fraction = fraction.rstrip("0")
    number = f"{grouped},{fraction}" if fraction else grouped
    return f"Rp {sign}{number}"


def format_long_date(dt: datetime) -> str:
    """Long Indonesian date, e.g. 'Minggu, 18 Oktober 2026'."""
    return f"{_WEEKDAYS_ID[dt.weekday()]}, {dt.day} {_MONTHS_ID[dt.month - 1]} {dt.year}"


def budget_status_emoji(percentage: int) -> str:
    """Traffic-light marker for budget usage."""
    if percentage >= 90:
        return "🔴"
    if percentage >= 70:
        return "🟡"
    return "🟢"


def trend_emoji(trend: str) -> str:
    return _TREND_EMOJI.get(trend, "➡️")


def get_base_system_prompt(now: datetime) -> str:
    """Persona and guardrails for the assistant, stamped with today's date."""
    return f"""Anda adalah asisten keuangan pribadi yang cerdas dan ramah untuk pengguna Indonesia.
Nama Anda adalah "FinBot" - Financial Bot Assistant.

PERAN ANDA:
1. ANALISIS data keuangan pengguna dan berikan insight yang dipersonalisasi
2. SARANKAN strategi penganggaran, tabungan, dan investasi
3. JAWAB pertanyaan umum tentang keuangan pribadi
4. DORONG kebiasaan keuangan yang sehat

PEDOMAN:
- Selalu bersikap suportif dan tidak menghakimi tentang kebiasaan pengeluaran
- Berikan saran yang actionable dan spesifik bila memungkinkan
- Gunakan format Rupiah (Rp) untuk referensi mata uang
- Pertimbangkan konteks keuangan Indonesia (bank lokal, opsi investasi seperti reksadana, saham IDX, emas, deposito)
- Jika ditanya tentang produk investasi spesifik, berikan informasi edukatif saja
- JANGAN pernah memberikan rekomendasi saham spesifik atau menjamin return investasi
- Ingatkan pengguna untuk berkonsultasi dengan penasihat keuangan berlisensi untuk keputusan besar

FORMAT RESPONS:
- Gunakan bahasa Indonesia yang natural dan mudah dipahami
- Gunakan emoji secukupnya untuk membuat percakapan lebih ramah 💰
- Format angka dengan pemisah ribuan (contoh: Rp 1.500.000)
- Gunakan bullet points atau numbered lists untuk informasi yang kompleks

BATASAN:
- Jangan memberikan advice tentang aktivitas ilegal atau penghindaran pajak
- Jangan menyimpan atau meminta informasi sensitif seperti PIN atau password
- Jika tidak yakin, sarankan untuk berkonsultasi dengan profesional

Tanggal saat ini: {format_long_date(now)}"""


def format_financial_context(summary: FinancialSummary) -> str:
    """Render a summary as the banner-delimited snapshot appended to the system prompt."""
    overview = summary.overview
    saving_rate = 0
    if overview.total_income > 0:
        ratio = overview.net_savings / overview.total_income * 100
        saving_rate = math.floor(ratio + Decimal("0.5"))

    lines = [
        "",
        BANNER,
        "SNAPSHOT KEUANGAN PENGGUNA (Data Real-time)",
        BANNER,
        "",
        f"📊 RINGKASAN PENDAPATAN & PENGELUARAN ({overview.period_start} - {overview.period_end}):",
        f"• Total Pendapatan: {format_currency(overview.total_income)}",
        f"• Total Pengeluaran: {format_currency(overview.total_expense)}",
        f"• Net Savings: {format_currency(overview.net_savings)}",
        f"• Saving Rate: {saving_rate}%",
    ]

    if summary.top_categories:
        lines += ["", "📈 TOP KATEGORI PENGELUARAN:"]
        for rank, category in enumerate(summary.top_categories, start=1):
            lines.append(
                f"{rank}. {category.category}: {format_currency(category.total)} "
                f"({category.percentage}%) {trend_emoji(category.trend)}"
            )

    portfolio = summary.portfolio
    if portfolio.total_value > 0:
        sign = "+" if portfolio.gain_loss >= 0 else ""
        allocation = ", ".join(
            f"{holding_type}: {format_currency(value)}"
            for holding_type, value in portfolio.allocation.items()
        )
        lines += [
            "",
            "💼 RINGKASAN PORTOFOLIO:",
            f"• Total Nilai: {format_currency(portfolio.total_value)}",
            f"• Gain/Loss: {sign}{format_currency(portfolio.gain_loss)}",
            f"• Alokasi: {allocation}",
        ]

    if summary.budgets:
        lines += ["", "💵 BUDGET AKTIF:"]
        for budget in summary.budgets:
            lines.append(
                f"• {budget.category}: {format_currency(budget.spent)} / "
                f"{format_currency(budget.limit)} ({budget.percentage}%) "
                f"{budget_status_emoji(budget.percentage)}"
            )

    if summary.goals:
        lines += ["", "🎯 SAVING GOALS:"]
        for goal in summary.goals:
            if goal.days_remaining is not None:
                days_text = f"{goal.days_remaining} hari tersisa"
            else:
                days_text = "Tanpa deadline"
            lines.append(f"• {goal.name}: {goal.progress}% tercapai ({days_text})")

    lines += [
        "",
        BANNER,
        "Gunakan data di atas untuk memberikan saran yang dipersonalisasi.",
        BANNER,
        "",
    ]
    return "\n".join(lines)

"""
Single source of truth for all Excel colors, fonts, fills, borders, alignments.
"""
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side

# ---------------------------------------------------------------------------
# Color constants
# ---------------------------------------------------------------------------
DEEP_NAVY = "0F172A"
SLATE = "1E293B"
LIGHT_SLATE = "E2E8F0"
HEADER_BG = "1E293B"
ALTERNATE_ROW = "F8FAFC"
WHITE = "FFFFFF"
BLACK = "000000"
CYAN = "0891B2"
LIGHT_CYAN = "ECFEFF"
LIGHT_EMERALD = "ECFDF5"
AMBER_LIGHT = "FFFBEB"
TOTAL_ROW_BG = "E0F2FE"
GRAY_666 = "666666"

# ---------------------------------------------------------------------------
# Fonts
# ---------------------------------------------------------------------------
TITLE_FONT = Font(name="Calibri", size=24, bold=True, color=DEEP_NAVY)
SUBTITLE_FONT = Font(name="Calibri", size=12, italic=True, color=GRAY_666)
HEADER_FONT = Font(name="Calibri", size=11, bold=True, color=WHITE)
DATA_FONT = Font(name="Calibri", size=10, color=BLACK)
MUTED_FONT = Font(name="Calibri", size=10, italic=True, color=GRAY_666)
TOTAL_FONT = Font(name="Calibri", size=10, bold=True, color=BLACK)
SECTION_FONT = Font(name="Calibri", size=14, bold=True, color=SLATE)
KPI_VALUE_FONT = Font(name="Calibri", size=28, bold=True, color=CYAN)
KPI_LABEL_FONT = Font(name="Calibri", size=10, color=GRAY_666)
LEGEND_BOLD_FONT = Font(name="Calibri", size=10, bold=True)

# ---------------------------------------------------------------------------
# Fills
# ---------------------------------------------------------------------------
HEADER_FILL = PatternFill(start_color=HEADER_BG, end_color=HEADER_BG, fill_type="solid")
LEGEND_FILL = PatternFill(start_color=LIGHT_SLATE, end_color=LIGHT_SLATE, fill_type="solid")
ALTERNATE_FILL = PatternFill(start_color=ALTERNATE_ROW, end_color=ALTERNATE_ROW, fill_type="solid")
TOTAL_FILL = PatternFill(start_color=TOTAL_ROW_BG, end_color=TOTAL_ROW_BG, fill_type="solid")
CYAN_FILL = PatternFill(start_color=LIGHT_CYAN, end_color=LIGHT_CYAN, fill_type="solid")
EMERALD_FILL = PatternFill(start_color=LIGHT_EMERALD, end_color=LIGHT_EMERALD, fill_type="solid")
AMBER_FILL = PatternFill(start_color=AMBER_LIGHT, end_color=AMBER_LIGHT, fill_type="solid")

# ---------------------------------------------------------------------------
# Borders
# ---------------------------------------------------------------------------
THIN_BORDER = Border(
    left=Side(style="thin", color="CBD5E1"),
    right=Side(style="thin", color="CBD5E1"),
    top=Side(style="thin", color="CBD5E1"),
    bottom=Side(style="thin", color="CBD5E1"),
)
HEADER_BORDER = Border(
    left=Side(style="thin", color=SLATE),
    right=Side(style="thin", color=SLATE),
    top=Side(style="thin", color=SLATE),
    bottom=Side(style="medium", color=SLATE),
)
TOTAL_BORDER = Border(
    left=Side(style="thin", color="94A3B8"),
    right=Side(style="thin", color="94A3B8"),
    top=Side(style="medium", color="94A3B8"),
    bottom=Side(style="medium", color="94A3B8"),
)

# ---------------------------------------------------------------------------
# Alignments
# ---------------------------------------------------------------------------
CENTER = Alignment(horizontal="center", vertical="center")
LEFT = Alignment(horizontal="left", vertical="center")
RIGHT = Alignment(horizontal="right", vertical="center")
WRAP = Alignment(horizontal="left", vertical="center", wrap_text=True)

# ---------------------------------------------------------------------------
# Highlight name -> fill mapping
# ---------------------------------------------------------------------------
HIGHLIGHT_FILLS = {
    "current": CYAN_FILL,
    "verified": EMERALD_FILL,
    "undisclosed": AMBER_FILL,
}

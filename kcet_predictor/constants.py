"""KCET 2025 calibration data and admissions-cycle constants."""

from collections import namedtuple
from types import MappingProxyType

CalibrationPoint = namedtuple("CalibrationPoint", ["score", "rank"])
RankGapBand = namedtuple(
    "RankGapBand", ["low", "high", "range", "rank_range", "candidates_per_1_percent"]
)
SuggestionRow = namedtuple("SuggestionRow", ["rank", "name", "branch"])

# Score weighting
EXAM_MAX_SCORE = 180
EXAM_WEIGHT = 0.6
PUC_WEIGHT = 0.4

# Candidate pool for the calibration year
TOTAL_CANDIDATES = 260000

# +/- spread applied around the interpolated rank
CONFIDENCE_SPREAD = 0.05

INVALID_MARKS_MESSAGE = "Please enter valid marks (KCET: 0-180, PUC: 0-100)"

# Composite score -> rank, ordered by descending score
CALIBRATION_TABLE = (
    # Top performers (95-100%)
    CalibrationPoint(96.22, 81),
    CalibrationPoint(94.06, 308),
    CalibrationPoint(90.00, 1245),
    CalibrationPoint(85.00, 3804),
    CalibrationPoint(80.00, 8500),
    # Mid-range performers (70-80%)
    CalibrationPoint(75.00, 16000),
    CalibrationPoint(70.00, 30000),
    CalibrationPoint(65.00, 50000),
    CalibrationPoint(60.00, 80000),
    # Lower performers (50-60%)
    CalibrationPoint(50.00, 155000),
    CalibrationPoint(40.00, 235000),
    CalibrationPoint(35.00, 259000),
)

# Fixed answers outside the calibrated range
ELITE_TIER = MappingProxyType({
    "low": 1,
    "medium": 1,
    "high": 1,
    "percentile": "Top 0.01%",
    "rank_band": "Elite",
    "competition_level": "Extremely High",
})
BOTTOM_TIER = MappingProxyType({
    "low": 250000,
    "medium": 260000,
    "high": 270000,
    "percentile": "Bottom 20%",
    "rank_band": "Very Poor",
    "competition_level": "Very Low",
})

# (upper rank bound, label), evaluated low to high
RANK_BANDS = (
    (200, "Elite"),
    (1200, "Excellent"),
    (3000, "Very Good"),
    (8000, "Good"),
    (16000, "Above Average"),
    (30000, "Average"),
    (50000, "Below Average"),
    (80000, "Lower"),
    (155000, "Poor"),
)
LOWEST_RANK_BAND = "Very Poor"

# (minimum composite, label), evaluated high to low
COMPETITION_LEVELS = (
    (95, "Extremely High"),
    (90, "Very High"),
    (85, "High"),
    (80, "Moderately High"),
    (75, "Moderate"),
    (70, "Moderately Low"),
    (60, "Low"),
)
LOWEST_COMPETITION_LEVEL = "Very Low"

PERCENTILE_LABELS = (
    (95, "Top 1%"),
    (90, "Top 5%"),
    (80, "Top 15%"),
    (70, "Top 30%"),
    (60, "Top 50%"),
)
LOWEST_PERCENTILE_LABEL = "Below Average"

IMPROVEMENT_POTENTIAL = (
    (80, "Limited"),
    (60, "Moderate"),
)
HIGHEST_IMPROVEMENT_POTENTIAL = "High"

RANK_ANALYSIS = (
    (200, "Elite rank! Top colleges like RVCE, BMSCE, MSRIT are within reach."),
    (1200, "Excellent rank! Strong chances for premier engineering colleges."),
    (3000, "Very good rank! Good options for top-tier colleges."),
    (8000, "Good rank! Solid chances for reputed colleges."),
    (16000, "Above average rank. Consider various college options."),
    (30000, "Average rank. Explore multiple college choices."),
    (50000, "Below average rank. Consider all available options."),
    (80000, "Lower rank. Focus on colleges with higher acceptance rates."),
    (155000, "Poor rank. Consider alternative pathways and colleges."),
)
LOWEST_RANK_ANALYSIS = (
    "Very poor rank. Explore all possible options including diploma courses."
)

RANK_GAP_BANDS = (
    RankGapBand(95, 100, "95-100%", "1-200", "20-30"),
    RankGapBand(90, 95, "90-95%", "200-1,200", "200-300"),
    RankGapBand(85, 90, "85-90%", "1,200-3,000", "350-400"),
    RankGapBand(80, 85, "80-85%", "3,000-8,000", "1,000"),
    RankGapBand(75, 80, "75-80%", "8,000-16,000", "1,500"),
    RankGapBand(70, 75, "70-75%", "16,000-30,000", "2,800"),
    RankGapBand(60, 70, "60-70%", "30,000-75,000", "4,000-5,000"),
    RankGapBand(50, 60, "50-60%", "75,000-1,55,000", "8,000-9,000"),
    RankGapBand(40, 50, "40-50%", "1,55,000-2,35,000", "8,000"),
    RankGapBand(30, 40, "30-40%", "2,35,000-2,59,000", "10,000"),
)

CUTOFF_ESTIMATES = (
    ("Top 100", "96%+"),
    ("Top 1,000", "92.5%+"),
    ("Top 5,000", "84.5%+"),
    ("Top 10,000", "79%+"),
    ("Top 20,000", "74.5%+"),
    ("Top 50,000", "65%+"),
    ("Top 100,000", "57%+"),
)

DEFAULT_CATEGORY = "general"
COLLEGE_SUGGESTIONS = MappingProxyType({
    "general": (
        SuggestionRow(200, "RVCE, BMSCE, IISc", "CSE, ECE, EEE"),
        SuggestionRow(1200, "MSRIT, PESIT, BMSIT", "CSE, ECE, ISE"),
        SuggestionRow(3000, "SIT, NMIT, DSCE", "CSE, ECE, ME"),
        SuggestionRow(8000, "CIT, SJCE, UVCE", "All branches"),
        SuggestionRow(16000, "Regional colleges", "All branches"),
        SuggestionRow(30000, "Private colleges", "All branches"),
    ),
    "obc": (
        SuggestionRow(300, "RVCE, BMSCE", "CSE, ECE"),
        SuggestionRow(1500, "MSRIT, PESIT", "CSE, ECE"),
        SuggestionRow(4000, "SIT, NMIT", "CSE, ECE"),
        SuggestionRow(10000, "CIT, SJCE", "All branches"),
        SuggestionRow(20000, "Regional colleges", "All branches"),
        SuggestionRow(40000, "Private colleges", "All branches"),
    ),
    "sc": (
        SuggestionRow(500, "RVCE, BMSCE", "CSE, ECE"),
        SuggestionRow(2000, "MSRIT, PESIT", "CSE, ECE"),
        SuggestionRow(6000, "SIT, NMIT", "CSE, ECE"),
        SuggestionRow(15000, "CIT, SJCE", "All branches"),
        SuggestionRow(30000, "Regional colleges", "All branches"),
        SuggestionRow(60000, "Private colleges", "All branches"),
    ),
    "st": (
        SuggestionRow(800, "RVCE, BMSCE", "CSE, ECE"),
        SuggestionRow(3000, "MSRIT, PESIT", "CSE, ECE"),
        SuggestionRow(8000, "SIT, NMIT", "CSE, ECE"),
        SuggestionRow(20000, "CIT, SJCE", "All branches"),
        SuggestionRow(40000, "Regional colleges", "All branches"),
        SuggestionRow(80000, "Private colleges", "All branches"),
    ),
})
FALLBACK_SUGGESTION = SuggestionRow(None, "Other colleges", "All branches")

# Closing ranks at fixed checkpoints in previous cycles
TREND_DATA = MappingProxyType({
    2022: (1, 150, 1200, 1800, 3500, 7000, 13000, 25000, 40000, 55000, 70000, 85000, 110000, 140000, 170000),
    2023: (1, 180, 1300, 1900, 3800, 7500, 14000, 28000, 43000, 58000, 72000, 88000, 115000, 150000, 180000),
    2024: (1, 200, 1500, 2000, 4000, 8000, 15000, 30000, 45000, 60000, 75000, 90000, 120000, 160000, 190000),
})

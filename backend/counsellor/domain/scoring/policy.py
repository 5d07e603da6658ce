"""
Scoring Policy Constants

Weights, half-credit tolerances and tier thresholds used by the fit and
profile-strength rubrics. The tolerances differ in granularity per exam
(0.5 GPA, 0.5 IELTS, 10 TOEFL, 20 GRE, 50 GMAT, 20% over budget); they are
kept as-is for compatibility with existing scores and are the knobs a
product owner would tune.
"""

# =============================================================================
# FIT SCORE WEIGHTS (max points per component)
# =============================================================================

ACADEMIC_FIT_WEIGHT = 40
ENGLISH_EXAM_WEIGHT = 30
GRADUATE_EXAM_WEIGHT = 20
BUDGET_FIT_WEIGHT = 10

# =============================================================================
# HALF-CREDIT TOLERANCES (how far below the requirement still earns half)
# =============================================================================

GPA_TOLERANCE = 0.5
IELTS_TOLERANCE = 0.5
TOEFL_TOLERANCE = 10
GRE_TOLERANCE = 20
GMAT_TOLERANCE = 50

# Cost may exceed the budget by this factor and still earn half credit
BUDGET_OVERRUN_FACTOR = 1.2

# =============================================================================
# CATEGORY THRESHOLDS (inclusive lower bounds)
# =============================================================================

SAFE_MIN_SCORE = 80
TARGET_MIN_SCORE = 60

# =============================================================================
# PROFILE STRENGTH
# =============================================================================

STRENGTH_ACADEMICS_WEIGHT = 40
STRENGTH_EXAMS_WEIGHT = 30
STRENGTH_GRADUATE_EXAM_WEIGHT = 20
STRENGTH_SOP_WEIGHT = 10

# (minimum gpa, points), checked top down; anything lower earns the floor
GPA_STRENGTH_TIERS = ((3.5, 40), (3.0, 30), (2.5, 20))
GPA_STRENGTH_FLOOR = 10

STRONG_GPA = 3.5
AVERAGE_GPA = 3.0

STRONG_IELTS = 7.0
STRONG_TOEFL = 100
AVERAGE_IELTS = 6.5
AVERAGE_TOEFL = 90

STRONG_GRE = 320
STRONG_GMAT = 650
AVERAGE_GRE = 300
AVERAGE_GMAT = 600

# Points per tier; the lowest tier of each is the floor for a supplied value
EXAMS_STRONG_POINTS = 30
EXAMS_AVERAGE_POINTS = 20
EXAMS_FLOOR_POINTS = 10

GRADUATE_EXAM_STRONG_POINTS = 20
GRADUATE_EXAM_AVERAGE_POINTS = 10
GRADUATE_EXAM_FLOOR_POINTS = 0

SOP_READY_POINTS = 10
SOP_DRAFT_POINTS = 5

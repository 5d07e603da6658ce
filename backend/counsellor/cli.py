#!/usr/bin/env python3
"""
Rank Universities CLI

Scores the university catalog for a profile given on the command line.

Usage:
    counsellor-rank --gpa 3.6 --ielts 7.0 --budget 40000
    counsellor-rank --gpa 3.6 --toefl 98 --gre 318 --top 3 --json
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from counsellor.domain.services import RecommendationService
from counsellor.infrastructure.catalog import UniversityRepository
from counsellor.infrastructure.exceptions import ConfigurationError


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="counsellor-rank",
        description="Rank catalog universities by fit score for a student profile",
    )
    parser.add_argument("--gpa", type=float, help="GPA on a 4.0 scale")
    parser.add_argument("--ielts", type=float, help="IELTS band score")
    parser.add_argument("--toefl", type=int, help="TOEFL iBT score")
    parser.add_argument("--gre", type=int, help="GRE total score")
    parser.add_argument("--gmat", type=int, help="GMAT total score")
    parser.add_argument("--budget", type=float, help="Annual budget")
    parser.add_argument("--sop-status", dest="sop_status", help="Not started, Draft or Ready")
    parser.add_argument("--catalog", help="Path to a university catalog JSON file")
    parser.add_argument("--top", type=int, default=None, help="Only show the best N")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of a table")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    try:
        repository = UniversityRepository.from_file(args.catalog)
    except ConfigurationError as e:
        logger.error(e.message)
        return 1

    profile = {
        "gpa": args.gpa,
        "ielts": args.ielts,
        "toefl": args.toefl,
        "gre": args.gre,
        "gmat": args.gmat,
        "budget": args.budget,
        "sop_status": args.sop_status,
    }

    service = RecommendationService(repository)
    recommendations = service.recommend(profile, limit=args.top)
    strength = service.profile_strength(profile)

    if args.json:
        print(json.dumps({
            "profile_strength": strength.to_dict(),
            "universities": [r.to_summary() for r in recommendations],
        }, indent=2))
        return 0

    print(
        f"Profile strength: {strength.overall}% "
        f"(academics: {strength.academics}, exams: {strength.exams}, SOP: {strength.sop})"
    )
    print()
    print(f"{'#':>3}  {'Fit':>4}  {'Category':<8}  University")
    for position, scored in enumerate(recommendations, start=1):
        print(
            f"{position:>3}  {scored.fit_score:>4}  {scored.category.value:<8}  "
            f"{scored.university.name} ({scored.university.country})"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())

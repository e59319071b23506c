#!/usr/bin/env python3
"""Skill Directory CLI."""

import argparse
import json
import logging
import sys
from config.settings import Settings
from directory.loader import SnapshotLoader, dump_models
from directory.skill_directory import SkillDirectory
from schemas.search import EmployeeMatch
from schemas.taxonomy import RootNode


def format_tree(root: RootNode) -> str:
    """Render a skill tree as indented text."""
    lines = [f"{root.name} ({len(root.employees)} people, {root.endorsement_count} endorsements)"]
    for category in root.children:
        lines.append(
            f"  {category.name} ({len(category.employees)} people, "
            f"{category.endorsement_count} endorsements)"
        )
        for skill in category.children:
            lines.append(
                f"    {skill.name} ({len(skill.employees)} people, "
                f"{skill.endorsement_count} endorsements)"
            )
    return "\n".join(lines)


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Skill Directory - skill taxonomy and quick search over an employee snapshot"
    )
    parser.add_argument(
        "--employees",
        "-e",
        type=str,
        required=True,
        help="Employee snapshot (JSON list or CSV with comma-separated skills)"
    )
    parser.add_argument(
        "--endorsements",
        type=str,
        help="Endorsement events (JSON list or CSV)"
    )
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument(
        "--tree",
        action="store_true",
        help="Print the category -> skill tree"
    )
    mode.add_argument(
        "--query",
        "-q",
        type=str,
        help="Run a quick search"
    )
    mode.add_argument(
        "--stats",
        action="store_true",
        help="Print headline skill statistics"
    )
    parser.add_argument(
        "--normalize",
        action="store_true",
        help="Classify skill labels case- and whitespace-insensitively"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit JSON instead of text"
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = Settings(
        employees_path=args.employees,
        endorsements_path=args.endorsements,
        normalize_skill_labels=args.normalize or None,
        verbose=args.verbose,
    )

    try:
        loader = SnapshotLoader()
        employees = loader.load_employees(settings.employees_path)
        endorsements = []
        if settings.endorsements_path:
            endorsements = loader.load_endorsements(settings.endorsements_path)

        directory = SkillDirectory(employees, endorsements, settings=settings)

        if args.tree:
            tree = directory.taxonomy()
            if args.json:
                print(json.dumps(tree.model_dump(mode="json", by_alias=True), indent=2))
            else:
                print(format_tree(tree))
        elif args.stats:
            stats = directory.stats()
            if args.json:
                print(json.dumps(stats.model_dump(mode="json"), indent=2))
            else:
                print(f"Total skills: {stats.total_skills}")
                print(f"Team members: {stats.team_members}")
                print(f"Avg skills/person: {stats.average_skills_per_employee}")
                for item in stats.top_skills:
                    print(f"  {item.skill}: {item.count}")
        else:
            results = directory.search(args.query)
            if args.json:
                print(json.dumps(dump_models(results), indent=2))
            elif not results:
                print("No results")
            else:
                for i, result in enumerate(results, 1):
                    if isinstance(result, EmployeeMatch):
                        employee = result.employee
                        print(f"{i}. [employee] {employee.name} - {employee.title} ({result.score:.2f})")
                    else:
                        print(f"{i}. [skill] {result.skill} ({result.score:.2f})")
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()

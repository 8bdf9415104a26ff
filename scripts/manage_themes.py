#!/usr/bin/env python
"""Admin CLI for storefront color themes.

Usage:
    python scripts/manage_themes.py list
    python scripts/manage_themes.py create --file theme.json [--activate]
    python scripts/manage_themes.py update 3 --file changes.json
    python scripts/manage_themes.py activate 3
    python scripts/manage_themes.py css [3] [--output public/theme.css]
    python scripts/manage_themes.py a11y [3]

Without an id, `css` and `a11y` use the active theme.
"""
import argparse
import json
import sys
from pathlib import Path

# Add parent directory to path so package imports work
sys.path.insert(0, str(Path(__file__).parent.parent))

from storefront.database import repository
from storefront.database.engine import get_engine, init_db, make_session_factory
from storefront.errors import ThemeError
from storefront.theme.accessibility import generate_a11y_report
from storefront.theme.css import generate_theme_css


def _load_json(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _pick_theme(session, theme_id):
    theme = (
        repository.get_theme(session, theme_id)
        if theme_id is not None
        else repository.get_active_theme(session)
    )
    if theme is None:
        raise ThemeError(f"No theme found (id={theme_id})" if theme_id else "No active theme")
    return theme


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage storefront color themes")
    parser.add_argument("--database-url", default=None, help="Override DATABASE_URL")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List themes, newest first")

    create = sub.add_parser("create", help="Create a theme from a JSON file")
    create.add_argument("--file", required=True)
    create.add_argument("--activate", action="store_true", help="Make it the active theme")

    upd = sub.add_parser("update", help="Merge JSON changes into a theme")
    upd.add_argument("theme_id", type=int)
    upd.add_argument("--file", required=True)

    act = sub.add_parser("activate", help="Make a theme the active one")
    act.add_argument("theme_id", type=int)

    css = sub.add_parser("css", help="Print or write the theme stylesheet")
    css.add_argument("theme_id", type=int, nargs="?")
    css.add_argument("--output", default=None)

    a11y = sub.add_parser("a11y", help="Contrast report for a theme's base colors")
    a11y.add_argument("theme_id", type=int, nargs="?")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    engine = get_engine(args.database_url)
    init_db(engine)
    session = make_session_factory(engine)()
    try:
        if args.command == "list":
            for theme in repository.list_themes(session):
                marker = "*" if theme.is_active else " "
                print(f"{marker} {theme.id:>4}  {theme.name}  (v{theme.version})")
        elif args.command == "create":
            draft = _load_json(args.file)
            if args.activate:
                draft["is_active"] = True
            theme = repository.create_theme(session, draft)
            print(f"Created theme {theme.id} ({theme.name}) active={theme.is_active}")
        elif args.command == "update":
            theme = repository.update_theme(session, args.theme_id, _load_json(args.file))
            print(f"Updated theme {theme.id} ({theme.name})")
        elif args.command == "activate":
            theme = repository.activate_theme(session, args.theme_id)
            print(f"Activated theme {theme.id} ({theme.name})")
        elif args.command == "css":
            css = generate_theme_css(_pick_theme(session, args.theme_id))
            if args.output:
                Path(args.output).write_text(css, encoding="utf-8")
                print(f"Wrote {args.output}")
            else:
                print(css, end="")
        elif args.command == "a11y":
            theme = _pick_theme(session, args.theme_id)
            report = generate_a11y_report(theme.base_colors)
            for key, entry in report.items():
                bg = entry["as_background"]
                print(
                    f"{key:<16} on white {entry['on_white'].ratio:>5}  "
                    f"on black {entry['on_black'].ratio:>5}  "
                    f"white text {'ok' if bg['with_white_text'].wcag_aa else '--'}  "
                    f"black text {'ok' if bg['with_black_text'].wcag_aa else '--'}"
                )
    except ThemeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    finally:
        session.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())

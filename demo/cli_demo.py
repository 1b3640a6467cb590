#!/usr/bin/env python3
"""
Interactive CLI demo for Entity Resolver Service.

Type loose team or holiday references and see what they resolve to.
"""
import argparse
import logging

from dotenv import load_dotenv

from entity_resolver.app import EntityResolverApp
from entity_resolver.config_loader import load_config_from_env

# Load environment variables
load_dotenv()


def print_banner():
    """Print welcome banner."""
    print("\n" + "=" * 60)
    print("  Entity Resolver - Interactive CLI Demo")
    print("=" * 60)
    print("\nTry things like:")
    print("  • kc royals")
    print("  • chiefs colors")
    print("  • seahwks")
    print("  • my team")
    print("\nType 'quit' or 'exit' to end the session.")
    print("-" * 60 + "\n")


def print_result(result, query):
    """Print formatted result."""
    print(f"\n🔎 Query: {query}")
    if result is None:
        print("❌ No match")
        print("-" * 60)
        return

    entity = result.entity
    colors = ", ".join(f"{c.name} {tuple(c.rgb)}" for c in entity.colors)
    print(f"✅ {entity.official_name} ({entity.category})")
    print(f"   confidence={result.confidence} match={result.match_type.value} alias='{result.matched_alias}'")
    print(f"🎨 Colors: {colors}")
    for alt in result.alternatives:
        print(f"   ↳ {alt.reason}: {alt.confidence}")
    print("-" * 60)


def parse_args():
    parser = argparse.ArgumentParser(description="Resolve team and holiday references")
    parser.add_argument("--team", action="append", default=[], help="Saved 'my team' name (repeatable)")
    parser.add_argument("--lat", type=float, help="User latitude")
    parser.add_argument("--lon", type=float, help="User longitude")
    parser.add_argument("--location", help="Free-text user location")
    parser.add_argument("--verbose", action="store_true", help="Show debug logging")
    return parser.parse_args()


def main():
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    app = EntityResolverApp(load_config_from_env())
    app.initialize()

    print_banner()
    while True:
        try:
            query = input("You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if query.lower() in ("quit", "exit"):
            break

        result = app.resolve(
            query,
            user_teams=args.team,
            user_lat=args.lat,
            user_lon=args.lon,
            user_location=args.location,
        )
        print_result(result, query)


if __name__ == "__main__":
    main()

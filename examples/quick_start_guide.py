#!/usr/bin/env python3
"""
Quick Start Guide for lightdom.

Builds a document, serializes it, parses it back and runs a few lookups,
including ones that miss.
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from lightdom import Document, Element, XMLParseError, parse


def quick_start_example():
    """Quick start example showing basic usage."""

    print("QUICK START - lightdom")
    print("=" * 45)

    # Step 1: Build a document through the API
    print("\nStep 1: Building a document")
    print("-" * 30)

    document = Document(root=Element("animals"))
    cats = document.root.add_child("cats")
    cats.add_child("cat", value="Tinna", attributes={"breed": "Siberian", "color": "lightgray"})
    cats.add_child("cat", value="Rose", attributes={"breed": "Domestic", "color": "darkgray"})
    cats.add_child("cat", value="Caesar", attributes={"breed": "Domestic", "color": "yellow"})
    document.root.add_child("dogs").add_child("dog", value="Villy", attributes={"color": "white"})

    print(document.xml_string)

    # Step 2: Parse the text back
    print("\nStep 2: Parsing")
    print("-" * 30)

    parsed = parse(document.xml_string_compact)
    statistics = parsed.last_parse_statistics
    print(f"Elements created: {statistics.elements_created}")
    print(f"Maximum depth: {statistics.max_depth}")

    # Step 3: Query
    print("\nStep 3: Queries")
    print("-" * 30)

    cat = parsed.root["cats"]["cat"]
    print(f"First cat: {cat.string_value}")
    print(f"Number of cats: {cat.count}")
    print(f"Last cat: {cat.last.string_value}")
    domestic = cat.all_with_attributes({"breed": "Domestic"}) or []
    print(f"Domestic cats: {[c.string_value for c in domestic]}")

    missing = parsed.root["birds"]["parrot"]
    print(f"Missing lookup is error: {missing.is_error} ({missing.value})")

    # Step 4: Parse errors
    print("\nStep 4: Parse errors")
    print("-" * 30)

    try:
        parse(b"<animals><cats></animals>")
    except XMLParseError as e:
        print(f"Parse failed: {e}")


if __name__ == "__main__":
    quick_start_example()

#!/usr/bin/env python3
"""
Example usage of the JSON XML Converter.

This script converts a JSON document to XML and back, showing where the
mapping is lossy: scalar types, null, attributes and single-item arrays.
"""

import asyncio
import json
import tempfile
from pathlib import Path
from json_xml_converter import JsonXmlConverter


async def main():
    """Main example function."""
    print("JSON XML Converter Example")
    print("=" * 50)

    # Create sample data
    sample_data = {
        "library": {
            "name": "City Library",
            "open": True,
            "rating": 4.50,
            "manager": None,
            "books": [
                {"title": "Dune", "year": 1965},
                {"title": "Neuromancer", "year": 1984}
            ],
            "branches": ["North"],
            "contact info": {"e-mail": "info@example.com"}
        }
    }

    json_string = json.dumps(sample_data, indent=2)
    print(f"Original JSON:\n{json_string}\n")

    with JsonXmlConverter(default_indent=2) as converter:
        xml_result = converter.json_to_xml(json_string)
        if not xml_result.success:
            print("❌ JSON to XML failed")
            for error in xml_result.errors or []:
                print(f"   Error: {error}")
            return

        print(f"✅ XML:\n{xml_result.output}")

        json_result = await converter.xml_to_json_async(xml_result.output)
        print(f"✅ Back to JSON:\n{json_result.output}\n")

        print("Notice:")
        print("   • numbers and booleans came back as strings")
        print("   • null came back as {\"@null\": \"true\"}")
        print("   • the one-item 'branches' array came back as a plain value")
        print("   • 'contact info' came back as 'contact_info'")

        # File based conversion
        with tempfile.TemporaryDirectory() as temp_dir:
            source = Path(temp_dir) / "library.json"
            source.write_text(json_string, encoding="utf-8")

            file_result = converter.convert_file(source)
            if file_result.success:
                print(f"\n✅ Wrote {file_result.output_path}")

        print()
        print(converter.profiler.export_metrics("summary"))


if __name__ == "__main__":
    asyncio.run(main())

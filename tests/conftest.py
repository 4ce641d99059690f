"""Pytest configuration and fixtures."""

import pytest
import tempfile
from pathlib import Path
from json_xml_converter import JsonXmlConverter


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def converter():
    """Converter with its worker threads shut down after the test."""
    with JsonXmlConverter() as instance:
        yield instance


@pytest.fixture
def sample_json_string():
    """Sample JSON document covering every value kind."""
    return '''
    {
        "name": "Alice",
        "age": 30,
        "score": 9.50,
        "active": true,
        "manager": null,
        "tags": ["admin", "dev"],
        "address": {"city": "New York", "zip code": "10001"}
    }
    '''


@pytest.fixture
def sample_xml_string():
    """Sample XML document with attributes, repeats and nesting."""
    return '''<?xml version="1.0" encoding="UTF-8"?>
<library id="main">
    <book lang="en">
        <title>Dune</title>
        <author>Frank Herbert</author>
    </book>
    <book lang="fr">
        <title>Vendredi</title>
        <author>Michel Tournier</author>
    </book>
    <owner>City</owner>
</library>
'''

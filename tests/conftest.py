"""Test configuration and fixtures for pytest test suite.

This module builds a throwaway content directory from sample documents and
provides fixtures for the Flask app, its test client and content rewrites.
"""
import json

import pytest

from portfolio import create_app

SAMPLE_CONTENT = {
    "navLinks.json": {
        "navLinks": [
            {"label": "Home", "href": "/"},
            {"label": "About", "href": "/about"},
        ]
    },
    "socialLinks.json": {
        "socialLinks": [
            {"name": "GitHub", "url": "https://github.com/example"},
        ]
    },
    "projects.json": {
        "projects": [
            {"title": "Alpha", "description": "First project."},
            {"title": "Bravo", "description": "Second project."},
            {"title": "Charlie", "description": "Third project."},
            {"title": "Delta", "description": "Fourth project."},
        ]
    },
    "experiences.json": {
        "jobs": [
            {"company": "Acme", "role": "Engineer", "period": "2024", "highlights": ["Shipped things."]},
        ]
    },
    "skills.json": {
        "Skills": [
            {"category": "Languages", "items": ["Python", "SQL"]},
        ]
    },
}


def write_document(data_dir, name, document):
    """Write ``document`` as JSON to ``data_dir/name``.

    :param data_dir: Directory to write into.
    :type data_dir: pathlib.Path
    :param name: File name of the document.
    :type name: str
    :param document: JSON-serialisable content.
    """
    (data_dir / name).write_text(json.dumps(document), encoding="utf-8")


@pytest.fixture
def data_dir(tmp_path):
    """Provide a content directory pre-populated with the sample documents.

    Each test gets its own copy, so tests may overwrite or delete files
    without affecting one another.

    :param tmp_path: Built-in pytest fixture giving a unique temporary directory.
    :type tmp_path: pathlib.Path
    :yields: Path to the populated content directory.
    :rtype: pathlib.Path
    """
    content_dir = tmp_path / "data"
    content_dir.mkdir()
    for name, document in SAMPLE_CONTENT.items():
        write_document(content_dir, name, document)
    yield content_dir


@pytest.fixture
def app(data_dir):
    """Create a Flask app instance pointed at the test content directory.

    :param data_dir: Content directory from the `data_dir` fixture.
    :type data_dir: pathlib.Path
    :yields: The configured Flask application instance.
    :rtype: flask.Flask
    """
    flask_app = create_app({
        "TESTING": True,
        "DATA_DIR": str(data_dir),
        "SITE_TITLE": "Test Site",
    })
    yield flask_app


@pytest.fixture
def client(app):
    """Provide a Flask test client for the application.

    :param app: The Flask application instance from the `app` fixture.
    :type app: flask.Flask
    :return: A Flask test client.
    :rtype: flask.testing.FlaskClient
    """
    return app.test_client()


@pytest.fixture
def write_content(data_dir):
    """Provide a helper that replaces one document in the test content directory.

    :param data_dir: Content directory from the `data_dir` fixture.
    :type data_dir: pathlib.Path
    :return: Callable taking a file name and the new document.
    :rtype: callable
    """
    def _write(name, document):
        write_document(data_dir, name, document)
    return _write

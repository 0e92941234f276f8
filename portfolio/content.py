"""
Module for loading site content and composing page contexts.

All of the website's content lives in flat JSON files under a single data
directory. This module reads those files, pulls the expected top-level list
out of each one (falling back to an empty list when the key is missing),
and merges the results into the data context each page template needs.

Every call reads fresh from disk. Nothing is cached and nothing is written.
"""
import json
import logging
import math
import os

logger = logging.getLogger(__name__)

# --- DOCUMENTS ---
NAV_LINKS_FILE = "navLinks.json"
SOCIAL_LINKS_FILE = "socialLinks.json"
PROJECTS_FILE = "projects.json"
EXPERIENCES_FILE = "experiences.json"
SKILLS_FILE = "skills.json"

# Maps each document to the top-level key(s) its list is stored under.
# navLink is a legacy spelling still accepted for the navigation document.
LIST_KEYS = {
    NAV_LINKS_FILE: ("navLinks", "navLink"),
    SOCIAL_LINKS_FILE: ("socialLinks",),
    PROJECTS_FILE: ("projects",),
    EXPERIENCES_FILE: ("jobs",),
    SKILLS_FILE: ("Skills",),
}

# Share of the project list shown on the home page.
PREVIEW_RATIO = 0.25


class ContentError(Exception):
    """Base class for failures while serving site content."""


class ReadError(ContentError):
    """A content file is missing or could not be read."""


class ParseError(ContentError):
    """A content file does not contain valid JSON."""


class NotFoundError(Exception):
    """No route matches the requested path."""


def read_json(rel_path, data_dir):
    """Read a JSON document stored under the data directory.

    :param rel_path: Path of the document relative to ``data_dir``.
    :type rel_path: str
    :param data_dir: Root directory holding the content files.
    :type data_dir: str
    :returns: The parsed document.
    :rtype: dict
    :raises ReadError: If the file is missing or unreadable.
    :raises ParseError: If the file contents are not valid JSON.
    """
    full_path = os.path.join(data_dir, rel_path)
    logger.debug("Reading content file %s", full_path)
    try:
        with open(full_path, "rb") as f:
            raw = f.read()
    except OSError as e:
        raise ReadError(f"Could not read {rel_path}: {e}") from e

    try:
        return json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ParseError(f"Invalid JSON in {rel_path}: {e}") from e


def get_list(document, *keys):
    """Return the list stored under the first of ``keys`` found in ``document``.

    Keys whose value is ``null`` are skipped. When none of the keys is
    present, or the document is not an object at all, a new empty list is
    returned so callers never have to check for ``None``.

    :param document: Parsed JSON document.
    :param keys: Candidate top-level keys, in order of preference.
    :returns: The stored list, or an empty list.
    :rtype: list
    """
    if not isinstance(document, dict):
        return []
    for key in keys:
        value = document.get(key)
        if value is not None:
            return value
    return []


def load_list(name, data_dir):
    """Read one of the named documents and return its list.

    :param name: Document file name, one of the keys of :data:`LIST_KEYS`.
    :type name: str
    :param data_dir: Root directory holding the content files.
    :type data_dir: str
    :returns: The document's list, defaulting to empty.
    :rtype: list
    """
    return get_list(read_json(name, data_dir), *LIST_KEYS[name])


def load_shared(data_dir):
    """Load the navigation and social links every page needs.

    :param data_dir: Root directory holding the content files.
    :type data_dir: str
    :returns: Dict with ``navLinks`` and ``socialLinks`` lists.
    :rtype: dict
    """
    return {
        "navLinks": load_list(NAV_LINKS_FILE, data_dir),
        "socialLinks": load_list(SOCIAL_LINKS_FILE, data_dir),
    }


def preview_count(length):
    """Number of projects to show on the home page for a list of ``length``."""
    if length <= 0:
        return 0
    return max(1, math.ceil(length * PREVIEW_RATIO))


def select_preview(projects):
    """Return the leading slice of ``projects`` shown on the home page.

    At least one project is shown whenever any exist, and about a quarter
    of the list otherwise (rounded up). An empty list gives an empty preview.

    :param projects: Projects in display order.
    :type projects: list
    :returns: A prefix of ``projects``.
    :rtype: list
    """
    return projects[:preview_count(len(projects))]


# --- PAGE COMPOSERS ---

def compose_home(data_dir, title):
    """Build the template context for the home page.

    :param data_dir: Root directory holding the content files.
    :type data_dir: str
    :param title: Site title shown on the home page.
    :type title: str
    :returns: Context with ``title``, ``navLinks``, ``socialLinks`` and ``previewProjects``.
    :rtype: dict
    """
    shared = load_shared(data_dir)
    projects = load_list(PROJECTS_FILE, data_dir)
    return {
        "title": title,
        **shared,
        "previewProjects": select_preview(projects),
    }


def compose_about(data_dir):
    """Build the template context for the about page."""
    shared = load_shared(data_dir)
    experiences = load_list(EXPERIENCES_FILE, data_dir)
    skills_root = load_list(SKILLS_FILE, data_dir)
    return {
        "title": "About",
        **shared,
        "experiences": experiences,
        "skillsRoot": skills_root,
    }


def compose_projects(data_dir):
    """Build the template context for the projects page."""
    shared = load_shared(data_dir)
    return {
        "title": "Projects",
        **shared,
        "projects": load_list(PROJECTS_FILE, data_dir),
    }


def compose_blog(data_dir):
    return {"title": "Blog", **load_shared(data_dir)}

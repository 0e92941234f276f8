from flask import Blueprint, current_app, render_template

from . import content

# Create a Blueprint named 'views'
views = Blueprint('views', __name__)


def _data_dir():
    return current_app.config['DATA_DIR']


# Route for the home page
@views.route('/')
def home():
    """Render the home page with a preview of the first few projects."""
    context = content.compose_home(_data_dir(), current_app.config['SITE_TITLE'])
    return render_template("index.html", **context)


@views.route('/about')
def about():
    """Render the about page with work experience and skills."""
    return render_template("about.html", **content.compose_about(_data_dir()))


@views.route('/projects')
def projects():
    """Render the full project list."""
    return render_template("projects.html", **content.compose_projects(_data_dir()))


@views.route('/blog')
def blog():
    """Render the blog page."""
    return render_template("blog.html", **content.compose_blog(_data_dir()))

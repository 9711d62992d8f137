"""
Templates, embedded so the catalog ships as plain Python modules.

Every view extends ``layout.html``. Entity text was escaped when the form
was submitted, so it is rendered with ``|safe``; everything else goes through
Jinja's autoescaping.
"""
from jinja2 import DictLoader

LAYOUT_TEMPLATE = """
<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{{ title }} - Local Library</title>
  <style>
    body{font-family: Arial, Helvetica, sans-serif; margin: 20px}
    nav a{margin-right:12px}
    .errors{color:red}
    .status-Available{color:green}
    .status-Maintenance{color:red}
    .status-Loaned, .status-Reserved{color:orange}
  </style>
</head>
<body>
<nav style="background:#f2f2f2;padding:10px;margin-bottom:20px;">
  <a href="{{ url_for('catalog.index') }}">Home</a> |
  <a href="{{ url_for('catalog.book_list') }}">All books</a> |
  <a href="{{ url_for('catalog.author_list') }}">All authors</a> |
  <a href="{{ url_for('catalog.genre_list') }}">All genres</a> |
  <a href="{{ url_for('catalog.bookinstance_list') }}">All book-instances</a>
  <br>
  <a href="{{ url_for('catalog.author_create_get') }}">Create new author</a> |
  <a href="{{ url_for('catalog.genre_create_get') }}">Create new genre</a> |
  <a href="{{ url_for('catalog.book_create_get') }}">Create new book</a> |
  <a href="{{ url_for('catalog.bookinstance_create_get') }}">Create new book instance (copy)</a>
</nav>
<h1>{{ title }}</h1>
{% block content %}{% endblock %}
{% if errors %}
<ul class="errors">
  {% for error in errors %}<li>{{ error.message }}</li>{% endfor %}
</ul>
{% endif %}
</body>
</html>
"""

HOME_TEMPLATE = """
{% extends "layout.html" %}
{% block content %}
<p>Welcome to <em>LocalLibrary</em>.</p>
<h2>Dynamic content</h2>
<p>The library has the following record counts:</p>
<ul>
  <li><strong>Books:</strong> {{ book_count }}</li>
  <li><strong>Copies:</strong> {{ book_instance_count }}</li>
  <li><strong>Copies available:</strong> {{ book_instance_available_count }}</li>
  <li><strong>Authors:</strong> {{ author_count }}</li>
  <li><strong>Genres:</strong> {{ genre_count }}</li>
</ul>
{% endblock %}
"""

ERROR_TEMPLATE = """
{% extends "layout.html" %}
{% block content %}
<p>{{ error.message }}</p>
<p>Status: {{ status }}</p>
{% endblock %}
"""

# Author templates
AUTHOR_LIST_TEMPLATE = """
{% extends "layout.html" %}
{% block content %}
<ul>
{% for author in author_list %}
  <li><a href="{{ author.url }}">{{ author.name|safe }}</a> ({{ author.lifespan }})</li>
{% else %}
  <li>There are no authors.</li>
{% endfor %}
</ul>
{% endblock %}
"""

AUTHOR_DETAIL_TEMPLATE = """
{% extends "layout.html" %}
{% block content %}
<h2>Author: {{ author.name|safe }}</h2>
<p>{{ author.lifespan }}</p>
<h3>Books</h3>
<dl>
{% for book in author_books %}
  <dt><a href="{{ book.url }}">{{ book.title|safe }}</a></dt>
  <dd>{{ book.summary|safe }}</dd>
{% else %}
  <p>This author has no books.</p>
{% endfor %}
</dl>
<p>
  <a href="{{ author.url }}/delete">Delete author</a> |
  <a href="{{ author.url }}/update">Update author</a>
</p>
{% endblock %}
"""

AUTHOR_FORM_TEMPLATE = """
{% extends "layout.html" %}
{% block content %}
<form method="post" action="">
  {{ form.hidden_tag() }}
  <p>
    {{ form.first_name.label }} {{ form.first_name(placeholder="First name") }}
    {{ form.family_name.label }} {{ form.family_name(placeholder="Family name") }}
  </p>
  <p>{{ form.date_of_birth.label }} {{ form.date_of_birth() }}</p>
  <p>{{ form.date_of_death.label }} {{ form.date_of_death() }}</p>
  <button type="submit">Submit</button>
</form>
{% endblock %}
"""

AUTHOR_DELETE_TEMPLATE = """
{% extends "layout.html" %}
{% block content %}
<h2>{{ author.name|safe }}</h2>
<p>{{ author.lifespan }}</p>
{% if author_books %}
  <p><strong>Delete the following books before attempting to delete this author.</strong></p>
  <dl>
  {% for book in author_books %}
    <dt><a href="{{ book.url }}">{{ book.title|safe }}</a></dt>
    <dd>{{ book.summary|safe }}</dd>
  {% endfor %}
  </dl>
{% else %}
  <p>Do you really want to delete this Author?</p>
  <form method="post" action="">
    <input type="hidden" name="csrf_token" value="{{ csrf_token() }}">
    <input type="hidden" name="authorid" value="{{ author.id }}">
    <button type="submit">Delete</button>
  </form>
{% endif %}
{% endblock %}
"""

# Genre templates
GENRE_LIST_TEMPLATE = """
{% extends "layout.html" %}
{% block content %}
<ul>
{% for genre in genre_list %}
  <li><a href="{{ genre.url }}">{{ genre.name|safe }}</a></li>
{% else %}
  <li>There are no genres.</li>
{% endfor %}
</ul>
{% endblock %}
"""

GENRE_DETAIL_TEMPLATE = """
{% extends "layout.html" %}
{% block content %}
<h2>Genre: {{ genre.name|safe }}</h2>
<h3>Books</h3>
<dl>
{% for book in genre_books %}
  <dt><a href="{{ book.url }}">{{ book.title|safe }}</a></dt>
  <dd>{{ book.summary|safe }}</dd>
{% else %}
  <p>This genre has no books.</p>
{% endfor %}
</dl>
<p>
  <a href="{{ genre.url }}/delete">Delete genre</a> |
  <a href="{{ genre.url }}/update">Update genre</a>
</p>
{% endblock %}
"""

GENRE_FORM_TEMPLATE = """
{% extends "layout.html" %}
{% block content %}
<form method="post" action="">
  {{ form.hidden_tag() }}
  <p>{{ form.name.label }} {{ form.name(placeholder="Fantasy, Poetry etc.") }}</p>
  <button type="submit">Submit</button>
</form>
{% endblock %}
"""

GENRE_DELETE_TEMPLATE = """
{% extends "layout.html" %}
{% block content %}
<h2>{{ genre.name|safe }}</h2>
{% if genre_books %}
  <p><strong>Delete the following books before attempting to delete this genre.</strong></p>
  <dl>
  {% for book in genre_books %}
    <dt><a href="{{ book.url }}">{{ book.title|safe }}</a></dt>
    <dd>{{ book.summary|safe }}</dd>
  {% endfor %}
  </dl>
{% else %}
  <p>Do you really want to delete this Genre?</p>
  <form method="post" action="">
    <input type="hidden" name="csrf_token" value="{{ csrf_token() }}">
    <input type="hidden" name="genreid" value="{{ genre.id }}">
    <button type="submit">Delete</button>
  </form>
{% endif %}
{% endblock %}
"""

# Book templates
BOOK_LIST_TEMPLATE = """
{% extends "layout.html" %}
{% block content %}
<ul>
{% for book in book_list %}
  <li><a href="{{ book.url }}">{{ book.title|safe }}</a> ({{ book.author.name|safe }})</li>
{% else %}
  <li>There are no books.</li>
{% endfor %}
</ul>
{% endblock %}
"""

BOOK_DETAIL_TEMPLATE = """
{% extends "layout.html" %}
{% block content %}
<p><strong>Author:</strong> <a href="{{ book.author.url }}">{{ book.author.name|safe }}</a></p>
<p><strong>Summary:</strong> {{ book.summary|safe }}</p>
<p><strong>ISBN:</strong> {{ book.isbn|safe }}</p>
<p><strong>Genre:</strong>
{% for genre in book.genre %}<a href="{{ genre.url }}">{{ genre.name|safe }}</a>{% if not loop.last %}, {% endif %}{% endfor %}
</p>
<h3>Copies</h3>
{% for copy in book_instances %}
  <hr>
  <p class="status-{{ copy.status }}">{{ copy.status }}</p>
  <p><strong>Imprint:</strong> {{ copy.imprint|safe }}</p>
  {% if copy.status != 'Available' %}<p><strong>Due back:</strong> {{ copy.due_back_formatted }}</p>{% endif %}
  <p><strong>Id:</strong> <a href="{{ copy.url }}">{{ copy.id }}</a></p>
{% else %}
  <p>There are no copies of this book in the library.</p>
{% endfor %}
<p>
  <a href="{{ book.url }}/delete">Delete book</a> |
  <a href="{{ book.url }}/update">Update book</a>
</p>
{% endblock %}
"""

BOOK_FORM_TEMPLATE = """
{% extends "layout.html" %}
{% block content %}
<form method="post" action="">
  {{ form.hidden_tag() }}
  <p>{{ form.title.label }} {{ form.title(placeholder="Name of book") }}</p>
  <p>{{ form.author.label }} {{ form.author() }}</p>
  <p>{{ form.summary.label }} {{ form.summary(rows=6, cols=80) }}</p>
  <p>{{ form.isbn.label }} {{ form.isbn(placeholder="ISBN13") }}</p>
  <div>{{ form.genre.label }} {{ form.genre() }}</div>
  <button type="submit">Submit</button>
</form>
{% endblock %}
"""

BOOK_DELETE_TEMPLATE = """
{% extends "layout.html" %}
{% block content %}
<h2>{{ book.title|safe }}</h2>
<p><strong>Author:</strong> {{ book.author.name|safe }}</p>
{% if book_instances %}
  <p><strong>Delete the following copies before attempting to delete this book.</strong></p>
  <ul>
  {% for copy in book_instances %}
    <li><a href="{{ copy.url }}">{{ copy.imprint|safe }}</a> ({{ copy.status }})</li>
  {% endfor %}
  </ul>
{% else %}
  <p>Do you really want to delete this Book?</p>
  <form method="post" action="">
    <input type="hidden" name="csrf_token" value="{{ csrf_token() }}">
    <input type="hidden" name="bookid" value="{{ book.id }}">
    <button type="submit">Delete</button>
  </form>
{% endif %}
{% endblock %}
"""

# BookInstance templates
BOOKINSTANCE_LIST_TEMPLATE = """
{% extends "layout.html" %}
{% block content %}
<ul>
{% for copy in bookinstance_list %}
  <li>
    <a href="{{ copy.url }}">{{ copy.book.title|safe }} : {{ copy.imprint|safe }}</a> -
    <span class="status-{{ copy.status }}">{{ copy.status }}</span>
    {% if copy.status != 'Available' %}(Due: {{ copy.due_back_formatted }}){% endif %}
  </li>
{% else %}
  <li>There are no book copies in this library.</li>
{% endfor %}
</ul>
{% endblock %}
"""

BOOKINSTANCE_DETAIL_TEMPLATE = """
{% extends "layout.html" %}
{% block content %}
<h2>ID: {{ bookinstance.id }}</h2>
<p><strong>Title:</strong> <a href="{{ bookinstance.book.url }}">{{ bookinstance.book.title|safe }}</a></p>
<p><strong>Imprint:</strong> {{ bookinstance.imprint|safe }}</p>
<p><strong>Status:</strong> <span class="status-{{ bookinstance.status }}">{{ bookinstance.status }}</span></p>
{% if bookinstance.status != 'Available' %}<p><strong>Due back:</strong> {{ bookinstance.due_back_formatted }}</p>{% endif %}
<p>
  <a href="{{ bookinstance.url }}/delete">Delete copy</a> |
  <a href="{{ bookinstance.url }}/update">Update copy</a>
</p>
{% endblock %}
"""

BOOKINSTANCE_FORM_TEMPLATE = """
{% extends "layout.html" %}
{% block content %}
<form method="post" action="">
  {{ form.hidden_tag() }}
  <p>{{ form.book.label }} {{ form.book() }}</p>
  <p>{{ form.imprint.label }} {{ form.imprint(placeholder="Publisher and date information") }}</p>
  <p>{{ form.due_back.label }} {{ form.due_back() }}</p>
  <p>{{ form.status.label }} {{ form.status() }}</p>
  <button type="submit">Submit</button>
</form>
{% endblock %}
"""

BOOKINSTANCE_DELETE_TEMPLATE = """
{% extends "layout.html" %}
{% block content %}
<p><strong>Title:</strong> <a href="{{ bookinstance.book.url }}">{{ bookinstance.book.title|safe }}</a></p>
<p><strong>Imprint:</strong> {{ bookinstance.imprint|safe }}</p>
<p><strong>Status:</strong> {{ bookinstance.status }}</p>
<p>Do you really want to delete this copy?</p>
<form method="post" action="">
  <input type="hidden" name="csrf_token" value="{{ csrf_token() }}">
  <input type="hidden" name="bookinstanceid" value="{{ bookinstance.id }}">
  <button type="submit">Delete</button>
</form>
{% endblock %}
"""

TEMPLATES = {
    "layout.html": LAYOUT_TEMPLATE,
    "home.html": HOME_TEMPLATE,
    "error.html": ERROR_TEMPLATE,
    "author_list.html": AUTHOR_LIST_TEMPLATE,
    "author_detail.html": AUTHOR_DETAIL_TEMPLATE,
    "author_form.html": AUTHOR_FORM_TEMPLATE,
    "author_delete.html": AUTHOR_DELETE_TEMPLATE,
    "genre_list.html": GENRE_LIST_TEMPLATE,
    "genre_detail.html": GENRE_DETAIL_TEMPLATE,
    "genre_form.html": GENRE_FORM_TEMPLATE,
    "genre_delete.html": GENRE_DELETE_TEMPLATE,
    "book_list.html": BOOK_LIST_TEMPLATE,
    "book_detail.html": BOOK_DETAIL_TEMPLATE,
    "book_form.html": BOOK_FORM_TEMPLATE,
    "book_delete.html": BOOK_DELETE_TEMPLATE,
    "bookinstance_list.html": BOOKINSTANCE_LIST_TEMPLATE,
    "bookinstance_detail.html": BOOKINSTANCE_DETAIL_TEMPLATE,
    "bookinstance_form.html": BOOKINSTANCE_FORM_TEMPLATE,
    "bookinstance_delete.html": BOOKINSTANCE_DELETE_TEMPLATE,
}


def template_loader():
    return DictLoader(TEMPLATES)

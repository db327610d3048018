import pytest
from pystache.parser import ParsingError

from templates import (
    DirectoryNotFound,
    TemplateLibrary,
    html_escape,
    load_templates
)


@pytest.fixture
def template_dir(tmp_path):
    (tmp_path / 'layout.mustache').write_text(
        '<title>{{title}}</title><main>{{{content}}}</main>', encoding='utf-8')
    (tmp_path / 'greeting.mustache').write_text('Hello, {{name}}!', encoding='utf-8')
    (tmp_path / 'README.txt').write_text('not a template', encoding='utf-8')
    nested = tmp_path / 'partials'
    nested.mkdir()
    (nested / 'items.mustache').write_text(
        '<ul>{{#items}}<li>{{label}}</li>{{/items}}</ul>', encoding='utf-8')
    return tmp_path

@pytest.fixture
def library(template_dir):
    return TemplateLibrary(load_templates(str(template_dir)))

def test_load_templates_scans_recursively(template_dir):
    templates = load_templates(str(template_dir))
    assert sorted(templates) == ['greeting', 'items', 'layout']
    assert templates['greeting'].source == 'Hello, {{name}}!'

def test_load_templates_empty_directory(tmp_path):
    assert load_templates(str(tmp_path)) == {}

def test_load_templates_missing_directory(tmp_path):
    with pytest.raises(DirectoryNotFound):
        load_templates(str(tmp_path / 'missing'))

def test_load_templates_parse_error_propagates(tmp_path):
    (tmp_path / 'broken.mustache').write_text('{{#open}}x{{/close}}', encoding='utf-8')
    with pytest.raises(ParsingError):
        load_templates(str(tmp_path))

def test_duplicate_name_last_scanned_wins(tmp_path):
    (tmp_path / 'page.mustache').write_text('top', encoding='utf-8')
    sub = tmp_path / 'sub'
    sub.mkdir()
    (sub / 'page.mustache').write_text('nested', encoding='utf-8')
    templates = load_templates(str(tmp_path))
    assert templates['page'].source == 'nested'

def test_render_substitutes_and_escapes(library):
    assert library.render('greeting', {'name': 'World'}) == 'Hello, World!'
    assert library.render('greeting', {'name': '<b>&"'}) == 'Hello, &lt;b&gt;&amp;&quot;!'
    assert library.render('greeting', {'name': "O'Brien"}) == "Hello, O'Brien!"

def test_render_iterates_sections(library):
    out = library.render('items', {'items': [{'label': 'a'}, {'label': 'b'}]})
    assert out == '<ul><li>a</li><li>b</li></ul>'

def test_render_is_deterministic(library):
    data = {'items': [{'label': 'x'}]}
    first = library.render('items', data)
    assert first
    assert first == library.render('items', data)

def test_render_unknown_template_is_empty(library):
    assert library.render('nope', {'name': 'x'}) == ''

def test_render_missing_key_is_empty(library):
    assert library.render('greeting', {}) == ''

def test_render_supports_partials(tmp_path):
    (tmp_path / 'outer.mustache').write_text('[{{>inner}}]', encoding='utf-8')
    (tmp_path / 'inner.mustache').write_text('{{value}}', encoding='utf-8')
    lib = TemplateLibrary(load_templates(str(tmp_path)))
    assert lib.render('outer', {'value': 'ok'}) == '[ok]'

def test_render_missing_partial_is_empty(tmp_path):
    (tmp_path / 'outer.mustache').write_text('[{{>ghost}}]', encoding='utf-8')
    lib = TemplateLibrary(load_templates(str(tmp_path)))
    assert lib.render('outer', {}) == ''

def test_render_page_wraps_content_in_layout(library):
    html = library.render_page('Hi', 'greeting', {'name': '<i>'})
    assert html == '<title>Hi</title><main>Hello, &lt;i&gt;!</main>'

def test_render_page_degrades_to_blank_content(library):
    html = library.render_page('Hi', 'missing', {})
    assert html == '<title>Hi</title><main></main>'

def test_library_membership(library):
    assert 'layout' in library
    assert 'README' not in library
    assert library.names() == ['greeting', 'items', 'layout']

def test_html_escape_keeps_apostrophes():
    assert html_escape("a & 'b' < \"c\" >") == "a &amp; 'b' &lt; &quot;c&quot; &gt;"

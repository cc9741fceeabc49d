from sizeguide.models.field_set import RichTextMarkup, freeze_fields
from sizeguide.utils.content_markup import (
    ERROR_TITLE,
    LOADING_TEXT,
    content_markup,
    empty_markup,
    error_markup,
    loading_markup,
)


class TestStates:
    def test_loading(self):
        assert LOADING_TEXT in loading_markup()

    def test_empty_message_escaped(self):
        assert "&lt;none&gt;" in empty_markup("<none>")

    def test_error_heading_and_message(self):
        markup = error_markup("HTTP error! status: 404 <x>")
        assert ERROR_TITLE in markup
        assert "HTTP error! status: 404 &lt;x&gt;" in markup


class TestContent:
    def test_rich_text_body_inserted_raw(self):
        fields = freeze_fields({"title": "Tops", "body": RichTextMarkup("<p><strong>42in</strong></p>")})
        markup = content_markup(fields)
        assert "<h3>Tops</h3>" in markup
        assert "<p><strong>42in</strong></p>" in markup

    def test_plain_body_escaped_with_line_breaks(self):
        markup = content_markup({"body": "S <36>\nM 38"})
        assert "S &lt;36&gt;<br>M 38" in markup

    def test_title_escaped(self):
        assert "<h3>&lt;script&gt;</h3>" in content_markup({"title": "<script>"})

    def test_title_fallback(self):
        for fields in ({}, {"title": ""}, {"title": 12}):
            assert "<h3>Size Guide</h3>" in content_markup(fields)

    def test_custom_default_title(self):
        assert "<h3>Guide</h3>" in content_markup({}, default_title="Guide")

    def test_non_string_body_renders_nothing(self):
        markup = content_markup({"body": {"type": "table"}})
        assert '<div class="size-guide-drawer__data-body"></div>' in markup

"""
UI component smoke tests.
Views and the app shell are framework-free, so these run headless.
"""

from gui.app import StorefrontApp
from gui.services.style_service import DocumentStyleTarget, FileStyleTarget, style_target_from_settings
from gui.state import AppState
from gui.theme import FALLBACK_THEME, FallbackTheme
from gui.views.base import BaseView
from gui.views.theme_editor import ThemeEditorView
from storefront.config import Settings


# ===========================================================================
# Theme / State Tests
# ===========================================================================


class TestTheme:
    """Tests for gui/theme.py."""

    def test_fallback_theme_instantiation(self):
        theme = FallbackTheme()
        assert theme.primary == "#3B82F6"
        assert set(theme.as_dict()) == {"primary", "secondary", "accent", "background", "text"}


class TestState:
    """Tests for gui/state.py."""

    def test_state_instantiation(self):
        state = AppState()
        assert state.current_view == "store"
        assert state.flags == {}


# ===========================================================================
# Style Target Tests
# ===========================================================================


class TestStyleTargets:
    def test_document_target_creates_then_replaces(self):
        head = {"other-styles": "body {}"}
        target = DocumentStyleTarget("theme-styles", head=head)
        assert target.css is None

        target.inject(":root { --a: 1; }")
        target.inject(":root { --a: 2; }")
        assert head["theme-styles"] == ":root { --a: 2; }"
        assert len(head) == 2
        assert target.injections == 2

        target.clear()
        assert "theme-styles" not in head
        assert head["other-styles"] == "body {}"

    def test_file_target_writes_and_clears(self, tmp_path):
        path = tmp_path / "static" / "theme.css"
        target = FileStyleTarget(path)
        target.inject(":root {}\n")
        assert path.read_text(encoding="utf-8") == ":root {}\n"
        target.inject(":root { --x: 1; }\n")
        assert target.css == ":root { --x: 1; }\n"
        assert list(path.parent.iterdir()) == [path]
        target.clear()
        assert not path.exists()

    def test_target_from_settings(self, tmp_path):
        doc = style_target_from_settings(Settings(theme_css_path=None, theme_style_element_id="x"))
        assert isinstance(doc, DocumentStyleTarget)
        assert doc.element_id == "x"
        css_file = style_target_from_settings(Settings(theme_css_path=str(tmp_path / "t.css")))
        assert isinstance(css_file, FileStyleTarget)


# ===========================================================================
# App Tests
# ===========================================================================


class TestApp:
    def test_app_session_lifecycle(self, service, style_target):
        app = StorefrontApp(service=service, style_target=style_target)
        assert app.chrome_colors() == FALLBACK_THEME.as_dict()

        ctx = app.start()
        assert ctx.ready
        assert app.chrome_colors()["primary"] == ctx.current_theme.base_colors["primary"]
        assert style_target.css is not None

        app.switch_view("themes")
        assert app.state.current_view == "themes"

        app.shutdown()
        assert app.theme is None
        assert style_target.css is None


# ===========================================================================
# View Tests
# ===========================================================================


class TestViews:
    def test_base_view_colors_without_context(self):
        assert BaseView().colors() == FALLBACK_THEME.as_dict()

    def test_editor_inline_errors(self, context):
        context.initialize()
        editor = ThemeEditorView(context=context)
        assert editor.submit() is None  # blank name
        assert editor.errors[0]["loc"] == "name"
        assert editor.preview_css() is None

    def test_editor_create_then_edit(self, context):
        context.initialize()
        editor = ThemeEditorView(context=context)
        editor.set_field("name", "Spring")
        editor.use_preset("green")
        editor.set_color("background", "#F0FDF4")
        editor.add_gradient({
            "id": "leaf",
            "name": "Leaf",
            "stops": [{"color": "#10B981", "position": 0}, {"color": "#059669", "position": 100}],
        })

        css = editor.preview_css()
        assert "--color-background: #F0FDF4;" in css
        assert "--gradient-leaf:" in css
        assert editor.text_contrast().wcag_aa is True

        saved = editor.submit()
        assert saved is not None and saved.name == "Spring"
        assert editor.errors == []

        editor.load(saved)
        editor.set_field("description", "Fresh greens")
        updated = editor.submit()
        assert updated.id == saved.id
        assert updated.description == "Fresh greens"
        assert len(context.themes) == 2

    def test_editor_contrast_with_bad_color(self):
        editor = ThemeEditorView()
        editor.set_color("text", "oops")
        assert editor.text_contrast() is None

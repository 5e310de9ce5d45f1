"""Tests for app module (Streamlit calls mocked out)."""

from unittest import mock

from ReTree import app


def _mock_st():
    st = mock.MagicMock()
    st.session_state = {}
    return st


class TestRunConversion:
    def test_valid_outline(self):
        st = _mock_st()
        with mock.patch.object(app, "st", st):
            app._run_conversion("- root\n    - a\n    - b")
        assert st.session_state["result"] == {
            "tree": "root\n  ├── a\n  └── b",
            "error_lines": [],
            "root_count": 1,
        }

    def test_format_error(self):
        st = _mock_st()
        with mock.patch.object(app, "st", st):
            app._run_conversion("- root\n  - bad\n    missing")
        result = st.session_state["result"]
        assert result["tree"] == "format error."
        assert result["error_lines"] == [2, 3]
        assert result["root_count"] == 1

    def test_two_roots(self):
        st = _mock_st()
        with mock.patch.object(app, "st", st):
            app._run_conversion("- a\n- b")
        result = st.session_state["result"]
        assert result["error_lines"] == []
        assert result["root_count"] == 2


class TestShowResult:
    def test_format_error_reported(self):
        st = _mock_st()
        result = {"tree": "format error.", "error_lines": [2], "root_count": 1}
        with mock.patch.object(app, "st", st), \
             mock.patch.object(app, "st_html") as st_html:
            app._show_result(result)
        st.error.assert_called_once()
        st_html.assert_not_called()
        st.download_button.assert_not_called()

    def test_tree_offers_copy_and_download(self):
        st = _mock_st()
        result = {"tree": "root\n  └── a", "error_lines": [], "root_count": 1}
        with mock.patch.object(app, "st", st), \
             mock.patch.object(app, "st_html") as st_html:
            app._show_result(result)
        st.error.assert_not_called()
        st_html.assert_called_once()
        assert st.download_button.call_args.kwargs["data"] == "root\n  └── a"


class TestMain:
    def test_empty_input_skips_conversion(self):
        st = _mock_st()
        st.columns.return_value = (mock.MagicMock(), mock.MagicMock())
        st.text_area.return_value = ""
        st.button.return_value = True
        with mock.patch.object(app, "st", st), \
             mock.patch.object(app, "render") as render:
            app.main()
        render.assert_not_called()
        assert "result" not in st.session_state

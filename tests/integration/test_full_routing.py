"""End-to-end tests for the route table.

Each test builds a Router the way an application does at startup, then
resolves requests and reverse-builds urls through the public API only.
"""

import pytest

from segment_router import MissingParameterError, Router

# ---------------------------------------------------------------------------
# 1. Static routes
# ---------------------------------------------------------------------------


class TestStaticRoutes:
    @pytest.mark.parametrize("method", ["GET", "POST"])
    def test_allowed_method_returns_defaults(self, router: Router, method: str):
        router.add("about", "/about", ["GET", "POST"]).defaults({"controller": "about"})
        assert router.match(method, "/about") == {"controller": "about"}

    @pytest.mark.parametrize("method", ["PUT", "DELETE", "PATCH"])
    def test_other_methods_return_empty(self, router: Router, method: str):
        router.add("about", "/about", ["GET", "POST"]).defaults({"controller": "about"})
        assert router.match(method, "/about") == {}

    @pytest.mark.parametrize("path", ["/", "/about/", "/abou", "/about/us"])
    def test_other_paths_return_empty(self, router: Router, path: str):
        router.add("about", "/about").defaults({"controller": "about"})
        assert router.match("GET", path) == {}


# ---------------------------------------------------------------------------
# 2. Dynamic routes
# ---------------------------------------------------------------------------


class TestDynamicRoutes:
    def test_multiple_named_params(self, router: Router):
        router.add("regex", "/:controller/:action")
        assert router.match("GET", "/foo/bar") == {"controller": "foo", "action": "bar"}

    def test_optional_params(self, router: Router):
        router.add("optional", r"/:controller/:action?/\d+:id?")
        assert router.match("GET", "/user/edit") == {"controller": "user", "action": "edit"}

    def test_wildcard(self, router: Router):
        router.add("wildcard", "/:controller/.*:wildcard")
        assert router.match("GET", "/wildcard/here/is/a/bunch/of/stuff") == {
            "controller": "wildcard",
            "wildcard": "here/is/a/bunch/of/stuff",
        }

    def test_with_static_and_regex(self, router: Router):
        router.add("admin", "/admin/:controller/:action?")
        assert router.match("GET", "/admin/dashboard") == {"controller": "dashboard"}

    def test_first_registered_wins(self, router: Router):
        router.add("specific", r"/posts/\d+:id").defaults({"controller": "post"})
        router.add("generic", "/:controller/:action?")
        assert router.match("GET", "/posts/7") == {"controller": "post", "id": "7"}
        assert router.match("GET", "/posts/latest") == {
            "controller": "posts",
            "action": "latest",
        }


# ---------------------------------------------------------------------------
# 3. Sub-directories
# ---------------------------------------------------------------------------


class TestSubDirectory:
    def test_with_sub_directory(self):
        defaults = {"controller": "dashboard", "directory": "admin"}
        router = Router("admin")
        router.add("dashboard", "/dashboard").defaults(defaults)

        assert router.match("GET", "/admin/dashboard") == defaults
        assert router.match("GET", "/dashboard") == {}


# ---------------------------------------------------------------------------
# 4. Reverse routing
# ---------------------------------------------------------------------------


class TestReverseRouting:
    def test_static(self, router: Router):
        router.add("static", "/welcome/home")
        assert router.url("static") == "/welcome/home"

    def test_regex(self, router: Router):
        router.add("crud", "/:controller/:action?/:id?").defaults(
            {"controller": "user", "action": "view", "id": None}
        )
        assert router.url("crud", {"controller": "post", "action": "create"}) == "/post/create"

    def test_without_optional_params(self, router: Router):
        router.add("oops", "/:controller/:action?").defaults({"action": "view"})
        assert router.url("oops", {"controller": "dashboard"}) == "/dashboard"

    def test_missing_segment_raises_error(self, router: Router):
        router.add("crud", "/:controller/:action?/:id?")
        with pytest.raises(MissingParameterError, match="controller"):
            router.url("crud")

    def test_built_url_matches_back(self, crud_router: Router):
        url = crud_router.url("crud", {"controller": "post", "action": "edit", "id": 12})
        assert url == "/post/edit/12"
        assert crud_router.match("GET", url) == {
            "controller": "post",
            "action": "edit",
            "id": "12",
        }

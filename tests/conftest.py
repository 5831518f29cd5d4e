"""
Test fixtures shared across all Code Auditor tests.
"""

import httpx
import pytest

from code_auditor.core.repo_resolver import GitHubClient


@pytest.fixture
def sample_js_code():
    """JavaScript with known problems for testing."""
    return '''counter = 0;
const unused = 5;

function check(value) {
  if (value = 3) {
    console.log("three");
  }
  return eval(value);
}
'''


@pytest.fixture
def clean_js_code():
    """JavaScript that no rule should flag."""
    return '''const total = [1, 2, 3].reduce((sum, value) => sum + value, 0);

function describe(label) {
  return `${label}: ${total}`;
}

export { describe };
'''


@pytest.fixture
def sample_html_code():
    """Markup with known problems for testing."""
    return '''<html>
<body>
  <center><img src="logo.png"></center>
  <p style="color: red">Hi</div>
</body>
</html>
'''


@pytest.fixture
def clean_html_code():
    """Markup that no rule should flag."""
    return '''<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <link rel="stylesheet" href="style.css">
</head>
<body>
  <main id="content">
    <img src="logo.png" alt="Company logo">
    <p class="intro">Hello</p>
  </main>
  <script src="app.js"></script>
</body>
</html>
'''


@pytest.fixture
def sample_css_code():
    """Stylesheet with known problems for testing."""
    return '''#header { color: red !important; }
#header { color: blue; }
.box {
  margin-top: 10px;
  margin-bottom: 10px;
  line-height: 20px;
  colr: black;
}
'''


@pytest.fixture
def clean_css_code():
    """Stylesheet that no rule should flag."""
    return '''.card {
  color: #333;
  padding: 8px;
  line-height: 1.5;
}
'''


class FakeGitHub:
    """In-memory stand-in for the GitHub REST API and the raw content host."""

    def __init__(self) -> None:
        self.default_branch = "main"
        self.metadata_status = 200
        self.tree_status = 200
        # Served with status 200 in place of every API JSON body when set
        self.api_text: str | None = None
        self.tree = [
            {"path": "index.html", "type": "blob", "sha": "a1"},
            {"path": "src", "type": "tree", "sha": "a2"},
            {"path": "src/app.js", "type": "blob", "sha": "a3"},
            {"path": "src/style.css", "type": "blob", "sha": "a4"},
            {"path": "src/missing.js", "type": "blob", "sha": "a5"},
            {"path": "README.md", "type": "blob", "sha": "a6"},
        ]
        self.files = {
            "index.html": "<html><body><p>Hi</p></body></html>\n",
            "src/app.js": "const result = eval(input);\n",
            "src/style.css": ".card {\n  color: #333;\n}\n",
        }
        self.requests: list[httpx.Request] = []

    @property
    def tree_refs(self) -> list[str]:
        return [
            r.url.path.split("/git/trees/", 1)[1]
            for r in self.requests
            if "/git/trees/" in r.url.path
        ]

    @property
    def metadata_requested(self) -> bool:
        return any(
            r.url.host == "api.github.com" and len(r.url.path.strip("/").split("/")) == 3
            for r in self.requests
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        parts = request.url.path.strip("/").split("/")

        if request.url.host == "api.github.com":
            if self.api_text is not None:
                return httpx.Response(200, text=self.api_text)
            if len(parts) == 3 and parts[0] == "repos":
                if self.metadata_status != 200:
                    return httpx.Response(self.metadata_status, json={"message": "Not Found"})
                return httpx.Response(200, json={"default_branch": self.default_branch})
            if len(parts) >= 6 and parts[3:5] == ["git", "trees"]:
                if self.tree_status != 200:
                    return httpx.Response(self.tree_status, json={"message": "Server Error"})
                return httpx.Response(200, json={"sha": "root", "tree": self.tree})

        if request.url.host == "raw.githubusercontent.com":
            content = self.files.get("/".join(parts[3:]))
            if content is not None:
                return httpx.Response(200, text=content)

        return httpx.Response(404, text="Not Found")

    def client(self, **kwargs) -> GitHubClient:
        transport = httpx.MockTransport(self.handler)
        return GitHubClient(http_client=httpx.AsyncClient(transport=transport), **kwargs)


@pytest.fixture
def fake_github():
    return FakeGitHub()

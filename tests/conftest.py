import datetime
import textwrap

import pytest

FIXED_NOW = datetime.datetime(2024, 6, 1, 12, 0, tzinfo=datetime.timezone.utc)


class FakeRepo:
    """
    Minimal in-memory posts repo stand-in.
    Set track_calls=True to record the order of read calls.
    """

    def __init__(self, files: dict[str, str], track_calls: bool = False):
        self.files = {
            name: textwrap.dedent(text).lstrip() for name, text in files.items()
        }
        self.track_calls = track_calls
        self.calls = []

    def list_post_files(self):
        return sorted(self.files)

    def filename_for_slug(self, slug: str):
        filename = f"{slug}.md"
        return filename if filename in self.files else None

    async def read_post_file(self, filename: str) -> str:
        if self.track_calls:
            self.calls.append(filename)
        if filename not in self.files:
            raise FileNotFoundError(filename)
        return self.files[filename]


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, list_posts_return=None, get_post_return=None, tags=None):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self._tags = tags or []
        self.tag_calls = []

    async def list_posts(self, tag=None):
        self.tag_calls.append(tag)
        if tag is None:
            return self._list_posts_return
        return [p for p in self._list_posts_return if tag in p.get("tags", [])]

    async def get_post(self, slug: str):
        return self._get_post_return

    async def list_tags(self):
        return self._tags


def write_post(directory, filename: str, text: str):
    path = directory / filename
    path.write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")
    return path


@pytest.fixture
def posts_dir(tmp_path):
    directory = tmp_path / "posts"
    directory.mkdir()
    write_post(
        directory,
        "hello-world.md",
        """
        ---
        title: Hello World
        author: Matt Brophy
        postDate: 2021-02-03
        tags: remix,react, javascript
        ---
        Hello <b>world</b>, this is the first post.

        A second paragraph.
        """,
    )
    write_post(
        directory,
        "newer-post.md",
        """
        ---
        title: Newer Post
        author: Matt Brophy
        postDate: "2022-07-10"
        tags: react
        ---
        # Heading

        Newer content.
        """,
    )
    write_post(
        directory,
        "secret-draft.md",
        """
        ---
        title: Work In Progress
        postDate: 2023-01-01
        tags: remix
        draft: true
        ---
        Not ready yet.
        """,
    )
    return directory

from scripts.validate_corpus import validate
from tests.conftest import write_post

GOOD = """
---
title: {title}
date: {date}
aliases: [{alias}]
---
body
"""


def test_clean_corpus_has_no_problems(tmp_path, caplog):
    write_post(tmp_path, "a.md", GOOD.format(title="One", date="2020-01-01", alias="/one.html"))
    write_post(tmp_path, "b.md", GOOD.format(title="Two", date="2020-01-02", alias="/two.html"))

    with caplog.at_level("INFO"):
        assert validate(str(tmp_path), "/:year/:month/:day/:slug/") == 0

    assert any("Checked 2 posts (0 drafts)" in r.message for r in caplog.records)


def test_reports_collisions_and_invalid_posts(tmp_path, caplog):
    write_post(tmp_path, "a.md", GOOD.format(title="One", date="2020-01-01", alias="/old.html"))
    write_post(tmp_path, "b.md", GOOD.format(title="Two", date="2020-01-02", alias="/old.html"))
    write_post(tmp_path, "c.md", "---\ntitle: No date\n---\nbody\n")

    with caplog.at_level("ERROR"):
        problems = validate(str(tmp_path), "/:year/:month/:day/:slug/")

    assert problems == 2
    messages = [r.message for r in caplog.records]
    assert any("alias collision on /old.html: a.md, b.md" in m for m in messages)
    assert any("Invalid post c.md: missing date" in m for m in messages)

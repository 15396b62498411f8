from triagebot.rfc_helper import rendered_link_body


def test_adds_rendered_link_for_first_text_file():
    body = rendered_link_body(
        "My RFC", "someone/rfcs", "my-branch", ["README.md", "text/0000-foo.md", "text/0001.md"]
    )
    assert body == (
        "My RFC\n\n[Rendered](https://github.com/someone/rfcs/blob/my-branch/text/0000-foo.md)"
    )


def test_keeps_original_body_as_prefix():
    original = "Line one\nLine two"
    body = rendered_link_body(original, "a/b", "c", ["text/x.md"])
    assert body.startswith(original + "\n\n[Rendered](")


def test_no_text_file_means_no_edit():
    assert rendered_link_body("body", "a/b", "c", ["README.md", "src/text/x.md"]) is None


def test_existing_rendered_link_means_no_edit():
    assert rendered_link_body("[Rendered](elsewhere)", "a/b", "c", ["text/x.md"]) is None


def test_empty_file_list():
    assert rendered_link_body("body", "a/b", "c", []) is None


def test_accepts_generator_of_filenames():
    body = rendered_link_body("b", "o/r", "ref", (name for name in ["text/z.md"]))
    assert body.endswith("/blob/ref/text/z.md)")
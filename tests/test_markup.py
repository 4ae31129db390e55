from app.services.markup_services import insert_images, render_markup


def test_plain_text_is_a_single_span():
    fragments = render_markup("Just some **markdown** text.\n\nWith two paragraphs.")

    assert len(fragments) == 1
    assert fragments[0].type == "text"
    assert fragments[0].content == "Just some **markdown** text.\n\nWith two paragraphs."


def test_important_block_becomes_callout():
    fragments = render_markup(":::important [X]\nBODY:::")

    assert len(fragments) == 1
    assert fragments[0].type == "callout"
    assert fragments[0].title == "X"
    assert fragments[0].body == "BODY"


def test_callout_without_title_uses_localized_label():
    assert render_markup(":::important\nBODY:::", language="en")[0].title == "Important Note"
    assert render_markup(":::important\nBODY:::")[0].title == "نکته مهم"
    assert render_markup(":::important\nBODY:::", language="xx")[0].title == "نکته مهم"


def test_steps_and_text_alternate_in_order():
    text = "Intro\n:::step [1]\nBreathe slowly.\n:::\nMiddle\n:::step\nNo number here:::\nOutro"
    fragments = render_markup(text)

    assert [f.type for f in fragments] == ["text", "step", "text", "step", "text"]
    assert fragments[1].number == "1"
    assert fragments[1].body == "Breathe slowly."
    assert fragments[3].number == "?"
    assert fragments[3].body == ""
    assert fragments[4].content == "\nOutro"


def test_unterminated_block_stays_plain_text():
    text = "Before :::step [2]\nnever closed"
    fragments = render_markup(text)

    assert len(fragments) == 1
    assert fragments[0].type == "text"
    assert fragments[0].content == text


def test_leading_unterminated_block_is_not_a_step():
    fragments = render_markup(":::important [Oops]\nno closing marker")

    assert [f.type for f in fragments] == ["text"]
    assert fragments[0].content.startswith(":::important")


def test_placeholders_become_image_blocks():
    text = "A [IMAGE_PLACEHOLDER_1] B [IMAGE_PLACEHOLDER_2] C [IMAGE_PLACEHOLDER_3]"
    fragments = render_markup(text, ["data:image/png;base64,AAA", ""])

    assert [f.type for f in fragments] == ["text", "image", "text"]
    assert fragments[1].url == "data:image/png;base64,AAA"
    assert fragments[2].content == " B  C "


def test_only_first_occurrence_of_a_placeholder_is_used():
    text = "[IMAGE_PLACEHOLDER_1] and again [IMAGE_PLACEHOLDER_1]"
    assert insert_images(text, ["img"]) == ":::image img::: and again "


def test_empty_image_block_is_skipped():
    assert render_markup("Text :::image   ::: more") == render_markup("Text ") + render_markup(" more")

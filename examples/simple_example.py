#!/usr/bin/env python3
"""
Simple Example: Two Columns of Wrapped Text

Lays a heading and a paragraph into two cells of an A4 page, stacking the
paragraph under the heading with the baseline add_text returns.
"""

from cellflow import Cell, PDFDocument, TextProperties, add_text, count_lines

PARAGRAPH = (
    "Text is wrapped at word boundaries so that no line is wider than its cell.\n"
    "Explicit line breaks are kept, and a word like "
    "Pneumonoultramicroscopicsilicovolcanoconiosis is split between letters."
)

doc = PDFDocument("columns.pdf", page_size="a4", unit="mm")

body = TextProperties(family="helvetica", size=10, vertical_padding=1.0)
heading = body.model_copy(update={"style": "bold", "size": 14, "align": "center"})

for column, align in enumerate(("left", "right")):
    x = column * 95
    last_y = add_text(doc, doc, "Cellflow", Cell(x, 0, 85), heading)

    props = body.model_copy(update={"align": align})
    print(f"Column {column + 1}: {count_lines(doc, PARAGRAPH, props, 85)} line(s)")
    add_text(doc, doc, PARAGRAPH, Cell(x, last_y + 2, 85), props)

doc.save()

print("✓ PDF saved to: columns.pdf")

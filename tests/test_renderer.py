"""Tests for the block renderer."""

import unittest

from pyblockhtml.document import (
    BLOCK_TYPES,
    BlockQuote,
    CodeBlock,
    ForeignHtmlBlock,
    Heading,
    IdDefinition,
    Link,
    List,
    ListItem,
    Paragraph,
    RawHtmlBlock,
    Ruler,
    Table,
    Text,
)
from pyblockhtml.exceptions import MalformedAttributeSyntax, UnknownBlockVariant
from pyblockhtml.rendering.inline import EscapingInlineConverter
from pyblockhtml.rendering.options import RenderConfig
from pyblockhtml.rendering.renderer import (
    BlockRenderer,
    collect_links,
    render,
    render_page,
)
from pyblockhtml.rendering.renderer_iface import RenderContext


class UpperConverter:
    """Records every conversion and upper-cases plain strings."""

    def __init__(self):
        self.calls = []

    def convert(self, content, ctx):
        self.calls.append(content)
        if isinstance(content, str):
            return content.upper()
        return "\n".join(str(c).upper() for c in content)


class BlockRenderingTest(unittest.TestCase):
    def setUp(self):
        self.ctx = RenderContext(converter=EscapingInlineConverter())

    def r(self, *blocks, ctx=None):
        return render(list(blocks), ctx or self.ctx)

    def test_empty_document(self):
        self.assertEqual(self.r(), "")

    def test_paragraph(self):
        self.assertEqual(self.r(Paragraph(("Hello", "world"))), "<p>Hello\nworld</p>\n")

    def test_paragraph_escapes_through_converter(self):
        self.assertEqual(self.r(Paragraph("a < b")), "<p>a &lt; b</p>\n")

    def test_paragraph_attributes(self):
        self.assertEqual(
            self.r(Paragraph("Hi", attrs=".lead #p1")),
            '<p class="lead" id="p1">Hi</p>\n',
        )

    def test_paragraph_uses_context_converter(self):
        conv = UpperConverter()
        ctx = RenderContext(converter=conv)
        self.assertEqual(self.r(Paragraph("hi"), ctx=ctx), "<p>HI</p>\n")
        self.assertEqual(conv.calls, ["hi"])

    def test_html_blocks_verbatim(self):
        lines = ("<div class='x'>", "<b>&</b>", "</div>")
        self.assertEqual(self.r(RawHtmlBlock(lines)), "<div class='x'>\n<b>&</b>\n</div>")
        self.assertEqual(self.r(ForeignHtmlBlock(("<!-- c -->",))), "<!-- c -->")

    def test_ruler_defaults(self):
        self.assertEqual(self.r(Ruler("-")), '<hr class="thin"/>\n')
        self.assertEqual(self.r(Ruler("_")), '<hr class="medium"/>\n')
        self.assertEqual(self.r(Ruler("*")), '<hr class="thick"/>\n')

    def test_ruler_explicit_class_augments_default(self):
        out = self.r(Ruler("*", attrs=".custom"))
        self.assertEqual(out, '<hr class="custom thick"/>\n')

    def test_ruler_append_order(self):
        ctx = RenderContext(
            converter=EscapingInlineConverter(),
            config=RenderConfig(attr_order="append"),
        )
        self.assertEqual(
            self.r(Ruler("*", attrs=".custom"), ctx=ctx), '<hr class="thick custom"/>\n'
        )

    def test_ruler_custom_classes(self):
        ctx = RenderContext(
            converter=EscapingInlineConverter(),
            config=RenderConfig(ruler_classes={"-": "a", "_": "b", "*": "c"}),
        )
        self.assertEqual(self.r(Ruler("_"), ctx=ctx), '<hr class="b"/>\n')

    def test_heading_content_is_not_reconverted(self):
        conv = UpperConverter()
        ctx = RenderContext(converter=conv)
        out = self.r(Heading(2, "Title &amp; <em>co</em>", attrs="#top"), ctx=ctx)
        self.assertEqual(out, '<h2 id="top">Title &amp; <em>co</em></h2>\n')
        self.assertEqual(conv.calls, [])

    def test_blockquote(self):
        out = self.r(BlockQuote((Paragraph("q"), Ruler("-")), attrs=".aside"))
        self.assertEqual(
            out,
            '<blockquote class="aside"><p>q</p>\n<hr class="thin"/>\n</blockquote>\n',
        )

    def test_table_with_header(self):
        table = Table(
            rows=(("c", "d"),),
            alignments=("left", "center"),
            header=("a", "b"),
        )
        self.assertEqual(
            self.r(table),
            "<table>\n"
            "<colgroup>\n"
            '<col align="left">\n'
            '<col align="center">\n'
            "</colgroup>\n"
            "<thead>\n"
            "<tr>\n<th>a</th><th>b</th>\n</tr>\n"
            "</thead>\n"
            "<tr>\n<td>c</td><td>d</td>\n</tr>\n"
            "</table>\n",
        )

    def test_table_without_header_and_with_attrs(self):
        table = Table(
            rows=(("1",), ("2",)), alignments=("right",), attrs=".grid"
        )
        out = self.r(table)
        self.assertNotIn("<thead>", out)
        self.assertNotIn("<th>", out)
        self.assertTrue(out.startswith('<table class="grid">\n<colgroup>\n'))
        self.assertIn("<tr>\n<td>1</td>\n</tr>\n<tr>\n<td>2</td>\n</tr>\n</table>\n", out)

    def test_code_block(self):
        out = self.r(CodeBlock(("<script>alert('x')</script>", "a && b")))
        self.assertEqual(
            out,
            "<pre><code>\n"
            "&lt;script&gt;alert(&#x27;x&#x27;)&lt;/script&gt;\n"
            "a &amp;&amp; b\n"
            "</code></pre>\n",
        )
        self.assertNotIn("<script>", out)

    def test_code_block_language_and_attrs(self):
        out = self.r(CodeBlock(("x = 1",), language="python", attrs="#snippet"))
        self.assertEqual(
            out, '<pre id="snippet"><code class="python">\nx = 1\n</code></pre>\n'
        )

    def test_code_block_without_lines(self):
        self.assertEqual(self.r(CodeBlock(())), "<pre><code>\n</code></pre>\n")

    def test_tight_list_item(self):
        item = ListItem((Paragraph("Hello"),))
        self.assertEqual(self.r(item), "<li>Hello</li>\n")

    def test_tight_list_item_keeps_inline_markup(self):
        item = ListItem((Paragraph(("a", Link((Text("b"),), url="/b"))),))
        self.assertEqual(self.r(item), '<li>a<a href="/b">b</a></li>\n')

    def test_tight_list_item_with_annotated_paragraph(self):
        item = ListItem((Paragraph("Hello", attrs=".x"),))
        self.assertEqual(self.r(item), '<li><p class="x">Hello</p>\n</li>\n')

    def test_spaced_list_item_keeps_paragraphs(self):
        item = ListItem((Paragraph("Hello"),), spaced=True)
        self.assertEqual(self.r(item), "<li><p>Hello</p>\n</li>\n")

    def test_multi_block_list_item_keeps_paragraphs(self):
        item = ListItem((Paragraph("a"), Paragraph("b")))
        self.assertEqual(self.r(item), "<li><p>a</p>\n<p>b</p>\n</li>\n")

    def test_tight_stripping_can_be_disabled(self):
        ctx = RenderContext(
            converter=EscapingInlineConverter(),
            config=RenderConfig(strip_tight_paragraphs=False),
        )
        item = ListItem((Paragraph("Hello"),))
        self.assertEqual(self.r(item, ctx=ctx), "<li><p>Hello</p>\n</li>\n")

    def test_unordered_and_ordered_lists(self):
        ul = List("ul", (ListItem((Paragraph("one"),)), ListItem((Paragraph("two"),))))
        self.assertEqual(self.r(ul), "<ul>\n<li>one</li>\n<li>two</li>\n</ul>\n")
        ol = List("ol", (ListItem((Paragraph("x"),), attrs=".done"),), attrs="start=3")
        self.assertEqual(
            self.r(ol), '<ol start="3">\n<li class="done">x</li>\n</ol>\n'
        )

    def test_nested_lists(self):
        inner = List("ul", (ListItem((Paragraph("b"),)),))
        outer = List("ol", (ListItem((Paragraph("a"), inner)),))
        self.assertEqual(
            self.r(outer),
            "<ol>\n<li><p>a</p>\n<ul>\n<li>b</li>\n</ul>\n</li>\n</ol>\n",
        )

    def test_id_definition_renders_nothing(self):
        self.assertEqual(self.r(IdDefinition("x", "http://example.com")), "")

    def test_reference_links_resolve_from_document(self):
        out = self.r(
            Paragraph((Link((Text("site"),), ref="home"),)),
            IdDefinition("home", "https://example.com/", title="Home"),
        )
        self.assertEqual(
            out, '<p><a href="https://example.com/" title="Home">site</a></p>\n'
        )

    def test_reference_defined_inside_blockquote(self):
        out = self.r(
            Paragraph((Link((Text("s"),), ref="h"),)),
            BlockQuote((IdDefinition("h", "/x"),)),
        )
        self.assertEqual(out, '<p><a href="/x">s</a></p>\n<blockquote></blockquote>\n')

    def test_reference_defined_inside_list_item(self):
        item = ListItem(
            (Paragraph((Link((Text("s"),), ref="h"),)), IdDefinition("h", "/x"))
        )
        self.assertEqual(
            self.r(List("ul", (item,))),
            '<ul>\n<li><p><a href="/x">s</a></p>\n</li>\n</ul>\n',
        )

    def test_collect_links_walks_containers(self):
        blocks = [
            IdDefinition("a", "/first"),
            List("ul", (ListItem((BlockQuote((IdDefinition("b", "/b"),)),)),)),
            BlockQuote((IdDefinition("a", "/second"),)),
        ]
        links = collect_links(blocks)
        self.assertEqual(sorted(links), ["a", "b"])
        self.assertEqual(links["a"].url, "/first")
        self.assertEqual(links["b"].url, "/b")

    def test_order_is_preserved(self):
        out = self.r(Heading(1, "T"), Paragraph("p"), Ruler("*"))
        self.assertEqual(out, '<h1>T</h1>\n<p>p</p>\n<hr class="thick"/>\n')

    def test_input_is_not_mutated(self):
        blocks = [Paragraph("a", attrs=".x"), List("ul", (ListItem((Paragraph("b"),)),))]
        snapshot = list(blocks)
        render(blocks, self.ctx)
        self.assertEqual(blocks, snapshot)

    def test_malformed_attributes_fail_the_render(self):
        with self.assertRaises(MalformedAttributeSyntax):
            self.r(Paragraph("ok"), Paragraph("bad", attrs="??"))

    def test_unknown_block_variant(self):
        class NotABlock:
            pass

        with self.assertRaises(UnknownBlockVariant):
            self.r(Paragraph("a"), NotABlock())

    def test_every_block_type_has_a_renderer(self):
        samples = {
            Paragraph: Paragraph("p"),
            RawHtmlBlock: RawHtmlBlock(("<x>",)),
            ForeignHtmlBlock: ForeignHtmlBlock(("<y>",)),
            Ruler: Ruler("-"),
            Heading: Heading(3, "h"),
            BlockQuote: BlockQuote(()),
            Table: Table(rows=(), alignments=()),
            CodeBlock: CodeBlock(("c",)),
            List: List("ul", ()),
            ListItem: ListItem(()),
            IdDefinition: IdDefinition("i", "/u"),
        }
        self.assertEqual(set(samples), set(BLOCK_TYPES))
        for block in samples.values():
            self.assertIsInstance(self.r(block), str)


class BlockRendererTest(unittest.TestCase):
    def test_class_interface(self):
        renderer = BlockRenderer()
        html = renderer.render([Paragraph("x")])
        self.assertEqual(html, "<p>x</p>\n")
        page = renderer.render_full_page("A & B", html)
        self.assertIn("<title>A &amp; B</title>", page)
        self.assertIn('<div class="document"><p>x</p>\n</div>', page)

    def test_render_page_extra_css(self):
        page = render_page("t", "", extra_css="p{color:red}")
        self.assertTrue(page.startswith("<!doctype html>"))
        self.assertIn("p{color:red}</style>", page)
        self.assertIn("hr.thick", page)

    def test_invalid_attr_order_rejected(self):
        with self.assertRaises(ValueError):
            RenderConfig(attr_order="sorted")


if __name__ == "__main__":
    unittest.main()

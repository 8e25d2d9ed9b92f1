"""Block → HTML rendering, transport-agnostic.

Contains:
- renderer_iface: the inline converter Protocol and the RenderContext value type
- attributes: attribute annotation parser, serializer and tag injection
- renderer: pure HTML renderer for block trees (fragment + page)
- table_builder: table row and column group helpers
- inline: inline HTML helpers and the default escaping converter
"""

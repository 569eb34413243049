"""Editor tools layer — validated, never-raising wrappers over core/.

Modules:
    base        CodeTool base class, ToolParameter and ToolResult.
    registry    Automatic tool discovery and lookup by name.
    code        The format, pack, unpack and size tools.
"""

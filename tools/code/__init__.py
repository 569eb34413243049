"""Code tools: format_code, pack_code, unpack_code, code_size."""

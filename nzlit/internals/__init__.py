"""Front end and diagnostics plumbing: grammar parser, reporter, error registry."""

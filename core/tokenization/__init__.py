"""
Package core.tokenization - Token counting pipeline.

Modules:
- counter: Per-file logic (doc file + tokenize -> FileResult)
- batch: TokenCountPool (job queue + worker threads + barrier)
"""

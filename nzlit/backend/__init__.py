"""Emitters for validated nonzero constructions (Rust source, LLVM IR)."""

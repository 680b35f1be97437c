"""HTTP evaluation service for BigInt operations."""

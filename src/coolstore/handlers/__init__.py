"""Handler contracts: results, cancellation, and the request/command seams."""

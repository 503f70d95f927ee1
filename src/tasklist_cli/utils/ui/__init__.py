"""Terminal UI: Rich output, render projection and the Textual app."""

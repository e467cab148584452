"""Core infrastructure: console color theming."""

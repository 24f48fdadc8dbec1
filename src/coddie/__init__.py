"""coddie - Scaffold Next.js projects with auth, payments and tooling."""

__version__ = "0.1.0"

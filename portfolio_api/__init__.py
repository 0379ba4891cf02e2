"""Portfolio API: FastAPI backend for the portfolio site (Firestore + Firebase Storage)."""

__version__ = "1.0.0"

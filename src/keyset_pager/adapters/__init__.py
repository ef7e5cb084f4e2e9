"""Backend adapters – SQLAlchemy and in-memory query executors."""

"""SQLAlchemy persistence for registered users."""

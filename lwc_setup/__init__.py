"""LWC test setup — scaffold Jest unit testing into a Salesforce DX project."""

__version__ = "0.1.0"

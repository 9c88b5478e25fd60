"""Scraping and parsing of the NBC exchange rate page."""

"""constants and small math helpers shared across glickopy"""

"""Habit Tracker: daily action templates, completion logs and weekly stats."""

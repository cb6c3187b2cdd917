"""Worked drills grouped by topic: basics, primitives, errors, iteration and concurrency."""
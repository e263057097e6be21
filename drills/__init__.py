"""Small practice exercises: TGA images, classic katas, text helpers and idiom drills."""

__version__ = "0.1.0"
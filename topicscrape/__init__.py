"""Topic page scraper.

topicscrape fetches a discussion topic page (a question, optional linked
questions and a flat list of comments), extracts comment-shaped records from
class-tagged markup regions and renders them as JSON or CSV.

The extraction core lives in ``topicscrape.extraction``; fetching and output
are thin layers around it.
"""

__version__ = "0.1.0"

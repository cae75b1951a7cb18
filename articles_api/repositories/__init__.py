# Repositories package.
#
# One class per aggregate, each wrapping the request's AsyncSession:
#
#   ArticleRepository     article reads (filtered + count pairs) and writes
#   NewspaperRepository   newspaper reads/writes, article detachment on delete
#
# Repositories flush but never commit.
from articles_api.repositories.article_repository import ArticleRepository
from articles_api.repositories.newspaper_repository import NewspaperRepository

__all__ = ["ArticleRepository", "NewspaperRepository"]

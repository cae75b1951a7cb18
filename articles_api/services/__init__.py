# Services package.
#
#   article_service       article rules + relational / S3 read path switch
#   newspaper_service     CRUD for Newspaper
#   s3_article_provider   cached article reads from one JSON document in S3
#   s3_file_provider      raw upload / download / list / delete in S3
#
# Services receive their repositories and providers through the
# constructor; the FastAPI dependencies in ``articles_api.dependencies``
# assemble them per request around the request's AsyncSession.

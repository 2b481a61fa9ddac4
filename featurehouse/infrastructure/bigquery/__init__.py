from featurehouse.infrastructure.bigquery.di import BigQueryProvider

__all__ = ["BigQueryProvider"]

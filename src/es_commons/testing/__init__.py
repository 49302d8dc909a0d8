"""Testing support – fakes for the clock and the Elasticsearch client."""

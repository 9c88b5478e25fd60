from nbc_rates import NBCSeleniumClient, combine_rates, parse_exchange_rates
from nbc_rates.ingestion.models import ExchangeRateSnapshot

NBC_URL = "https://www.nbc.gov.kh/english/economic_research/exchange_rate.php"

# Render the rate page in headless Chrome and parse the table
with NBCSeleniumClient() as client:
    html = client.fetch_page_source(NBC_URL)

result = parse_exchange_rates(html)
print(result.official_rate)  # e.g. '4083'

snapshot = ExchangeRateSnapshot.build(combine_rates(result))
print(snapshot.to_dict()["rates"][:2])

# Run the HTTP service instead (reads the NBC environment variable):
#   NBC=https://www.nbc.gov.kh/english/economic_research/exchange_rate.php nbc-rates
#   curl http://localhost:3000/

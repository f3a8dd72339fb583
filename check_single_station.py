import logging
import sys
from precip_window.data.fetchers import build_report_url, fetch_report_page
from precip_window.data.parsing import parse_month
from precip_window.stations import lookup_station

logging.basicConfig(level=logging.INFO)

# Known station to test (block_no)
TEST_REF = sys.argv[1] if len(sys.argv) > 1 else "47430"
YEAR, MONTH = 2024, 3

station = lookup_station(TEST_REF)
print(f"Checking station {station.id} ({station.display_name}), layout {station.layout.url_type}...")
print(f"URL: {build_report_url(station.region_code, station.id, YEAR, MONTH, station.layout)}")

html = fetch_report_page(station.region_code, station.id, YEAR, MONTH, station.layout)
if html is None:
    print("Fetch failed.")
    sys.exit(1)

print(f"Downloaded {len(html)} characters.")
days = parse_month(html, station.layout)
print(f"Parsed {len(days)} days.")
for day, mm in sorted(days.items())[:10]:
    print(f"  {YEAR}-{MONTH:02d}-{day:02d}: {mm} mm")
print(f"Month total: {sum(days.values()):.1f} mm")

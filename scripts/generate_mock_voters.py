import pandas as pd
import numpy as np
from datetime import datetime

from voters.filters import PARTY_OPTIONS
from voters.results import NEGATIVE_RESULTS, NEUTRAL_RESULTS, NOT_CONTACTED, POSITIVE_RESULTS

FIRST_NAMES = ["Maria", "James", "Ana", "Robert", "Linda", "Jose", "Karen", "David", "Lupe", "Michael"]
LAST_NAMES = ["Garcia", "Smith", "Nguyen", "Johnson", "Lopez", "Brown", "Martinez", "Davis", "Hernandez", "Wilson"]
STREET_NAMES = ["Camelback Rd", "Indian School Rd", "Thomas Rd", "McDowell Rd", "Central Ave", "7th St", "16th St"]
STREET_DIRS = ["N", "S", "E", "W", None]


def generate_mock_voters(num_voters=500, output_file="mock_voters.csv", unlocated_share=0.05, seed=None):
    """
    Generates a realistic voter export to exercise cut lists and route planning.
    Households are scattered around central Phoenix, a few rows are left
    un-geocoded (blank or 0,0 coordinates) the way real exports arrive.
    """
    rng = np.random.default_rng(seed)

    # Center around Phoenix, AZ (the dashboard's default map center)
    CENTER_LAT = 33.4484
    CENTER_LON = -112.074

    results = [NOT_CONTACTED] * 6 + list(POSITIVE_RESULTS) + list(NEGATIVE_RESULTS) + list(NEUTRAL_RESULTS)

    data = []
    for voter_index in range(num_voters):
        # Households within ~3km (roughly 0.03 degrees)
        lat = CENTER_LAT + rng.uniform(-0.03, 0.03)
        lon = CENTER_LON + rng.uniform(-0.03, 0.03)

        # Some rows were never geocoded: half blank, half the 0,0 default
        roll = rng.random()
        if roll < unlocated_share / 2:
            lat, lon = np.nan, np.nan
        elif roll < unlocated_share:
            lat, lon = 0.0, 0.0

        data.append({
            "unique_id": f"v_{str(voter_index+1).zfill(6)}",
            "first_name": rng.choice(FIRST_NAMES),
            "last_name": rng.choice(LAST_NAMES),
            "street_num": str(rng.integers(100, 9999)),
            "street_dir": rng.choice(STREET_DIRS),
            "street_name": rng.choice(STREET_NAMES),
            "city": "Phoenix",
            "zip": f"850{rng.integers(0, 99):02d}",
            "party": rng.choice(PARTY_OPTIONS, p=[0.35, 0.35, 0.05, 0.03, 0.12, 0.05, 0.05]),
            "latitude": np.round(lat, 6),
            "longitude": np.round(lon, 6),
            "lives_elsewhere": bool(rng.random() < 0.1),
            "is_mail_voter": bool(rng.random() < 0.6),
            "canvass_result": rng.choice(results),
        })

    # Save to CSV
    df = pd.DataFrame(data)
    df.to_csv(output_file, index=False)
    print(f"Generated {num_voters} voters at {datetime.now():%Y-%m-%d %H:%M} and saved to '{output_file}'")

    # Print a quick preview of the party mix
    print("\nParty mix:")
    counts = df["party"].value_counts()
    for name, count in counts.items():
        print(f"  {name}: {count} voters")

    return df


if __name__ == "__main__":
    generate_mock_voters(num_voters=500)

import logging
import os
import time

from cutlists.models import CutList
from cutlists.planner import plan_route, select_voters, summarize_progress
from cutlists.policy import default_policy
from routing.directions import walking_directions_url
from voters.filters import VoterFilter, party_breakdown
from voters.loader import load_voters_csv

# A block-sized cut list in central Phoenix, drawn clockwise
DOWNTOWN_CUT_LIST = {
    "id": "cl_downtown",
    "name": "Downtown Phoenix",
    "description": "Roosevelt Row to Van Buren",
    "boundary_polygon": '[{"lat": 33.4590, "lng": -112.0820}, {"lat": 33.4590, "lng": -112.0640},'
                        ' {"lat": 33.4440, "lng": -112.0640}, {"lat": 33.4440, "lng": -112.0820}]',
}


def run_simulation(filepath="mock_voters.csv"):
    print("=== STARTING CUT LIST ROUTE SIMULATION ===")

    # 1. Load Data
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    absolute_path = filepath if os.path.isabs(filepath) else os.path.join(base_dir, filepath)
    voters = load_voters_csv(absolute_path)
    print(f"Loaded {len(voters)} Voters.\n")

    # 2. Configure System
    policy = default_policy()
    cut_list = CutList.from_record(DOWNTOWN_CUT_LIST)
    voter_filter = VoterFilter(lives_at_property_only=True)

    # 3. Step 1: Geofence + filters
    selected = select_voters(voters, cut_list, voter_filter)
    print(f"Cut list '{cut_list.name}' selected {len(selected)} voters.")
    for party, count in party_breakdown(selected):
        print(f"  {party}: {count}")

    # 4. Step 2: Sequence the walk
    start_time = time.time()
    plan = plan_route(selected, policy=policy)
    print(f"\nRoute built for {plan.stop_count} stops in {time.time() - start_time:.3f}s.")
    print(f"Distance: {plan.distance_label} | Estimated time: {plan.duration_label}")
    if plan.unlocated_count:
        print(f"{plan.unlocated_count} stops need geocoding (placed at the end).")

    print("\n--- Walk Order (first 10) ---")
    for index, voter in enumerate(plan.stops[:10], 1):
        print(f"{index:>3}. {voter.display_name:<24} {voter.address}")

    progress = summarize_progress(selected)
    print("\n=== SIMULATION COMPLETE ===")
    print(f"Contacted: {progress.contacted} / {progress.total} ({progress.contact_rate:.0%})")
    print(f"Positive: {progress.positive} | Negative: {progress.negative} | Neutral: {progress.neutral}")
    print(f"Directions: {walking_directions_url(plan.stops, policy.max_waypoints)}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    run_simulation()

from netlink_planner.recommendations.filters import apply_constraints, filter_catalog


def test_filter_keeps_matching_media(fiber_a, wan_request):
    assert filter_catalog([fiber_a], wan_request) == [fiber_a]


def test_filter_drops_over_budget(make_medium, wan_request):
    assert filter_catalog([make_medium(cost_per_km=10001)], wan_request) == []


def test_filter_budget_boundary_is_inclusive(make_medium, wan_request):
    media = make_medium(cost_per_km=10000)
    assert filter_catalog([media], wan_request) == [media]


def test_filter_drops_wrong_scenario(make_medium, wan_request):
    media = make_medium(applicable_scenarios=["lan", "datacenter"])
    assert filter_catalog([media], wan_request) == []


def test_filter_drops_inactive(make_medium, wan_request):
    assert filter_catalog([make_medium(is_active=False)], wan_request) == []


def test_filter_drops_insufficient_bandwidth_or_reach(make_medium, wan_request):
    short_reach = make_medium(id=2, max_distance=49)
    thin_pipe = make_medium(id=3, max_bandwidth=999)
    assert filter_catalog([short_reach, thin_pipe], wan_request) == []


def test_filter_preserves_catalog_order(make_medium, wan_request):
    catalog = [
        make_medium(id=3),
        make_medium(id=1, applicable_scenarios=["lan"]),
        make_medium(id=2),
    ]
    assert [m.id for m in filter_catalog(catalog, wan_request)] == [3, 2]


def test_constraints_absent_keep_everything(fiber_a, wan_request):
    assert apply_constraints([fiber_a], wan_request) == [fiber_a]


def test_reliability_floor(fiber_a, make_request):
    assert apply_constraints([fiber_a], make_request(reliability_minimum=9)) == [fiber_a]
    assert apply_constraints([fiber_a], make_request(reliability_minimum=9.5)) == []


def test_latency_ceiling_uses_end_to_end_latency(fiber_a, make_request):
    # 0.005 ms/km over 50 km
    assert apply_constraints([fiber_a], make_request(latency_maximum=0.25)) == [fiber_a]
    assert apply_constraints([fiber_a], make_request(latency_maximum=0.2)) == []


def test_zero_latency_ceiling_is_still_a_constraint(fiber_a, make_request):
    assert apply_constraints([fiber_a], make_request(latency_maximum=0)) == []


def test_environmental_floor(fiber_a, make_request):
    assert apply_constraints([fiber_a], make_request(environmental_minimum=8)) == [fiber_a]
    assert apply_constraints([fiber_a], make_request(environmental_minimum=9)) == []


def test_installation_difficulty_ceiling(fiber_a, make_request):
    assert apply_constraints([fiber_a], make_request(installation_difficulty_maximum=7)) == [fiber_a]
    assert apply_constraints([fiber_a], make_request(installation_difficulty_maximum=6)) == []

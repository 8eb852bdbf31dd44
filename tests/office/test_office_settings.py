import pytest

from hr_portal.core.exceptions import GeofenceViolation, ValidationError


def test_defaults(container):
    settings = container.office_service.get_settings()
    assert settings.office_location.latitude == pytest.approx(19.0760)
    assert settings.office_location.longitude == pytest.approx(72.8777)
    assert settings.clock_in_radius == 500


def test_update_settings_moves_the_geofence(container, alice, fixed_now):
    container.office_service.update_settings(latitude=10, longitude=20, clock_in_radius=5000)

    settings = container.office_service.get_settings()
    assert (settings.office_location.latitude, settings.office_location.longitude) == (10, 20)
    assert settings.clock_in_radius == 5000

    with pytest.raises(GeofenceViolation):
        container.attendance_service.clock_in(alice.employee_id, {"latitude": 19.0760, "longitude": 72.8777}, now=fixed_now)
    assert container.attendance_service.clock_in(alice.employee_id, {"latitude": 10.01, "longitude": 20}, now=fixed_now)


@pytest.mark.parametrize(
    "latitude, longitude, radius",
    [(91, 0, 500), (0, -181, 500), (0, 0, 49), (0, 0, 5001), ("x", 0, 500)],
)
def test_update_settings_rejects_out_of_range(container, latitude, longitude, radius):
    with pytest.raises(ValidationError):
        container.office_service.update_settings(latitude=latitude, longitude=longitude, clock_in_radius=radius)

"""Display labels for place attributes."""
from typing import Optional

from workability.models import NoiseBucket, Place, WifiStatus

NOISE_LABELS = {
    NoiseBucket.QUIET: "Below average",
    NoiseBucket.MODERATE: "Average",
    NoiseBucket.NOISY: "Above average",
}


def wifi_status(place: Place) -> WifiStatus:
    if place.no_wifi:
        return WifiStatus("No WiFi", "Not Available")

    if place.download is not None and place.download > 0:
        speed = int(place.download + 0.5)
        if speed >= 50:
            return WifiStatus("Fast WiFi", "Excellent")
        if speed >= 25:
            return WifiStatus("Very Good WiFi", "Very Good")
        if speed >= 10:
            return WifiStatus("Good WiFi", "Good")
        return WifiStatus(f"{speed} Mbps", "Basic")

    return WifiStatus("WiFi Available", "Unknown")


def format_distance(distance: Optional[float]) -> str:
    if distance is None:
        return "Distance unknown"
    if distance == 0:
        return "You are here"
    if distance < 0.1:
        return "Less than 0.1 miles away"
    if distance < 10:
        return f"{distance:.1f} miles away"
    return f"{int(distance + 0.5)} miles away"


def noise_label(place: Place) -> str:
    if not place.noise:
        return "Unknown"
    return NOISE_LABELS.get(place.noise_bucket, place.noise)

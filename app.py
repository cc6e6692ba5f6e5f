"""
Impact Effects Simulator Web Application

This Flask application exposes the impact effects engine over HTTP. Clients
post asteroid parameters and an impact location and receive the derived
physical effects (crater, fireball, blast, seismic, tsunami) together with a
human-readable report. Helper endpoints expose the population density lookup
and the historical earthquake comparison used by the map interface.
"""

import logging
import math

from flask import Flask, jsonify, request

from impactsim.earthquakes import NOTABLE_EARTHQUAKES, compare_magnitude
from impactsim.geography import build_impact_location, get_population_density
from impactsim.parameters import AsteroidParameters, AsteroidType, density_for_type
from impactsim.results import run_simulation_full

# Configure logging for monitoring incoming requests and failures.
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(message)s')
logger = logging.getLogger(__name__)

app = Flask(__name__)


class InvalidParameterError(ValueError):
    """Raised when a request parameter is present but outside its valid range."""


def parse_asteroid(data):
    """
    Build AsteroidParameters from a request payload.

    A missing density falls back to the default for the asteroid type.

    Raises:
        KeyError: a required field is missing
        ValueError: a field is not numeric or the type is unknown
        InvalidParameterError: a value is outside its physical range
    """
    type_name = str(data.get('type', AsteroidType.STONE.value)).lower()
    try:
        asteroid_type = AsteroidType(type_name)
    except ValueError:
        raise InvalidParameterError(f"Unknown asteroid type '{type_name}'. Use iron, stone or comet.")

    diameter = float(data['diameter'])
    speed = float(data['speed'])
    angle = float(data.get('angle', 45))
    density = data.get('density')
    density = density_for_type(asteroid_type) if density is None else float(density)

    if not all(math.isfinite(v) for v in (diameter, speed, angle, density)):
        raise InvalidParameterError("Asteroid parameters must be finite numbers.")
    if diameter <= 0:
        raise InvalidParameterError("Diameter must be greater than 0 meters.")
    if speed <= 0:
        raise InvalidParameterError("Impact speed must be greater than 0 m/s.")
    if not (0 <= angle <= 90):
        raise InvalidParameterError("Impact angle must be between 0 and 90 degrees.")
    if density <= 0:
        raise InvalidParameterError("Density must be greater than 0 kg/m³.")

    return AsteroidParameters(
        type=asteroid_type,
        diameter=diameter,
        speed=speed,
        angle=angle,
        density=density,
    )


def parse_coordinates(data):
    lat = float(data['latitude'])
    lon = float(data['longitude'])
    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise InvalidParameterError("Latitude and longitude must be finite numbers.")
    if not (-90 <= lat <= 90):
        raise InvalidParameterError("Latitude must be between -90 and 90 degrees.")
    return lat, lon


def parse_location(data):
    """
    Build an ImpactLocation from a request payload.

    Population density and city name are filled from the city lookup when the
    client does not send them.
    """
    lat, lon = parse_coordinates(data)
    population_density = data.get('populationDensity')
    if population_density is not None:
        population_density = float(population_density)
        if not math.isfinite(population_density) or population_density < 0:
            raise InvalidParameterError("Population density must be a non-negative number.")
    city_name = data.get('cityName')
    if city_name is not None:
        city_name = str(city_name)
    return build_impact_location(lat, lon, city_name, population_density)


@app.route('/simulate', methods=['POST'])
def simulate():
    """
    Primary endpoint for running an impact simulation.

    Expected JSON Input:
        asteroid (object):
            type (str, optional): iron, stone or comet (defaults to stone).
            diameter (float): Diameter in meters (> 0).
            speed (float): Impact speed in m/s (> 0).
            angle (float, optional): Impact angle in degrees (0-90, defaults to 45).
            density (float, optional): Density in kg/m³ (> 0, defaults to the type density).
        location (object):
            latitude (float): Latitude in degrees (-90 to 90).
            longitude (float): Longitude in degrees.
            populationDensity (float, optional): People per km² (defaults to the city lookup).
            cityName (str, optional): Place name; a real name marks the site as land.

    Returns:
        JSON: {"results_text": str, "results_data": dict}

    Raises:
        HTTP 400: If input parameters are missing or invalid.
        HTTP 500: If an internal error occurs during the simulation.
    """
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValueError("Request body must be a JSON object.")
        asteroid = parse_asteroid(data['asteroid'])
        location = parse_location(data['location'])
    except InvalidParameterError as e:
        return jsonify({"error": str(e)}), 400
    except (KeyError, ValueError, TypeError, AttributeError):
        return jsonify({"error": "Invalid input. Please provide numeric values for all required parameters."}), 400

    logger.info(
        "Simulation request: D=%sm, v=%sm/s, θ=%s°, ρ=%skg/m³ at (%.4f, %.4f)",
        asteroid.diameter, asteroid.speed, asteroid.angle, asteroid.density,
        location.latitude, location.longitude,
    )

    try:
        results_text, results_data = run_simulation_full(asteroid, location)
    except Exception as e:
        logger.error(f"Error in /simulate: {e}")
        return jsonify({"error": "An internal error occurred."}), 500

    return jsonify({
        "results_text": results_text,
        "results_data": results_data
    })


@app.route('/population_density', methods=['POST'])
def population_density():
    """
    Population density estimate for a coordinate pair.

    Expected JSON Input:
        {"latitude": 40.7128, "longitude": -74.006}

    Example Response:
        {"density": 10947, "cityName": "New York"}
    """
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValueError("Request body must be a JSON object.")
        lat, lon = parse_coordinates(data)
    except InvalidParameterError as e:
        return jsonify({"error": str(e)}), 400
    except KeyError:
        return jsonify({"error": "Missing latitude or longitude."}), 400
    except (ValueError, TypeError):
        return jsonify({"error": "Invalid latitude or longitude."}), 400

    estimate = get_population_density(lat, lon)
    return jsonify({"density": estimate.density, "cityName": estimate.city_name})


@app.route('/earthquakes', methods=['GET'])
def earthquakes():
    """Historical earthquake catalog, ascending by magnitude."""
    return jsonify([eq.to_dict() for eq in NOTABLE_EARTHQUAKES])


@app.route('/compare_magnitude', methods=['POST'])
def compare_magnitude_endpoint():
    """
    Compare a seismic magnitude with the historical catalog.

    Expected JSON Input:
        {"magnitude": 7.5}
    """
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValueError("Request body must be a JSON object.")
        magnitude = float(data['magnitude'])
    except KeyError:
        return jsonify({"error": "Missing magnitude."}), 400
    except (ValueError, TypeError):
        return jsonify({"error": "Invalid magnitude."}), 400

    return jsonify(compare_magnitude(magnitude).to_dict())


if __name__ == '__main__':
    app.run(host='0.0.0.0', port=5000, debug=False)

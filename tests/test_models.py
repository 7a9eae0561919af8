"""
Tests for data models.
"""

import math

import pytest
from pydantic import ValidationError

from motionlab.models.classification import ClassificationResult
from motionlab.models.parameters import (
    MOTION_PARAMETERS,
    ModuleKind,
    PendulumParameters,
    ProjectileParameters,
    SpringParameters,
    WaveKind,
    WaveParameters,
    default_parameters,
    parameters_for,
    resolve_module,
)


class TestMotionParameters:
    """Tests for the parameter variants."""

    def test_defaults(self):
        """Test the documented default values."""
        projectile = default_parameters(ModuleKind.PROJECTILE)
        assert projectile == ProjectileParameters(velocity=50, angle=45, gravity=9.8, time_step=0.1)

        spring = default_parameters(ModuleKind.SPRING)
        assert spring.mass == 1.0
        assert spring.spring_constant == 10.0
        assert spring.time_step == 0.05

        pendulum = default_parameters(ModuleKind.PENDULUM)
        assert pendulum.initial_angle == 30.0

        wave = default_parameters(ModuleKind.WAVE)
        assert wave.wave_type is WaveKind.TRANSVERSE
        assert wave.wavelength == 2.0

    def test_camel_case_wire_names(self):
        """Test inputs are dumped with camelCase keys and no module tag."""
        inputs = SpringParameters(spring_constant=20).to_inputs()

        assert inputs == {
            "mass": 1.0,
            "springConstant": 20.0,
            "amplitude": 1.0,
            "damping": 0.0,
            "timeStep": 0.05,
        }

    def test_wave_type_serialized_as_string(self):
        """Test enums are dumped by value."""
        inputs = WaveParameters(wave_type=WaveKind.LONGITUDINAL).to_inputs()
        assert inputs["waveType"] == "longitudinal"

    def test_discriminated_union(self):
        """Test the module tag selects the variant."""
        params = MOTION_PARAMETERS.validate_python(
            {"module": "PendulumMotion", "length": 2, "initialAngle": 10}
        )
        assert isinstance(params, PendulumParameters)
        assert params.kind is ModuleKind.PENDULUM
        assert params.initial_angle == 10.0

    def test_non_finite_rejected(self):
        """NaN and infinity are not valid parameter values."""
        with pytest.raises(ValidationError):
            SpringParameters(mass=math.nan)
        with pytest.raises(ValidationError):
            ProjectileParameters(velocity=math.inf)

    def test_frozen(self):
        """Parameter sets are immutable."""
        params = SpringParameters()
        with pytest.raises(ValidationError):
            params.mass = 3.0


class TestParametersFor:
    """Tests for building parameters from partial inputs."""

    def test_missing_fields_take_defaults(self):
        """Test partial inputs are completed with defaults."""
        params = parameters_for(ModuleKind.SPRING, {"mass": 2})
        assert params.mass == 2.0
        assert params.spring_constant == 10.0

    def test_null_fields_take_defaults(self):
        """Test null values are treated as missing."""
        params = parameters_for(ModuleKind.PROJECTILE, {"velocity": None, "angle": 60})
        assert params.velocity == 50.0
        assert params.angle == 60.0

    def test_explicit_zero_kept(self):
        """An explicit zero is a value, not a missing field."""
        params = parameters_for(ModuleKind.SPRING, {"damping": 0, "amplitude": 0})
        assert params.amplitude == 0.0

    def test_snake_and_camel_case(self):
        """Both spellings are accepted."""
        camel = parameters_for(ModuleKind.SPRING, {"springConstant": 5})
        snake = parameters_for(ModuleKind.SPRING, {"spring_constant": 5})
        assert camel == snake

    def test_unknown_keys_ignored(self):
        """Test unknown keys and a stray module tag are dropped."""
        params = parameters_for(ModuleKind.WAVE, {"colour": "red", "module": "SpringOscillation"})
        assert params == WaveParameters()

    def test_invalid_value(self):
        """Test non-numeric values raise."""
        with pytest.raises(ValidationError):
            parameters_for(ModuleKind.PENDULUM, {"length": "long"})


class TestResolveModule:
    """Tests for module name resolution."""

    def test_aliases(self):
        """Test short aliases and full names."""
        assert resolve_module("spring") is ModuleKind.SPRING
        assert resolve_module("WaveVibration") is ModuleKind.WAVE
        assert resolve_module("projectilemotion") is ModuleKind.PROJECTILE
        assert resolve_module(" Pendulum ") is ModuleKind.PENDULUM

    def test_unknown(self):
        """Test unknown names raise ValueError."""
        with pytest.raises(ValueError):
            resolve_module("orbit")


class TestClassificationResult:
    """Tests for ClassificationResult."""

    def test_payload(self):
        """Test the response shape."""
        result = ClassificationResult(
            module=ModuleKind.PROJECTILE,
            inputs=ProjectileParameters(velocity=15, angle=60),
            explanation="Launch at 60 degrees.",
            source="llm",
        )

        payload = result.to_payload()
        assert payload["module"] == "ProjectileMotion"
        assert payload["inputs"]["velocity"] == 15.0
        assert payload["inputs"]["timeStep"] == 0.1
        assert payload["explanation"] == "Launch at 60 degrees."

    def test_payload_without_module(self):
        """Test a non-animated answer has empty inputs."""
        result = ClassificationResult(explanation="Energy is conserved.")

        assert result.to_payload() == {
            "module": None,
            "inputs": {},
            "explanation": "Energy is conserved.",
        }

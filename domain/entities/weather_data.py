"""
WeatherData Entity - Clima atual de uma cidade como recebido da API
Mesmo formato é usado no fio (JSON do OpenWeather) e na persistência
"""
import math
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from domain.value_objects.temperature import Temperature
from domain.value_objects.weather_icon import IconCategory, icon_category_for


@dataclass(frozen=True)
class WeatherCondition:
    """Uma entrada de `weather` (descrição + código de ícone)"""
    description: str
    icon: str

    def to_dict(self) -> Dict[str, str]:
        return {'description': self.description, 'icon': self.icon}


@dataclass(frozen=True)
class WeatherData:
    """
    Entidade imutável de clima atual

    Criada a partir da resposta da API ou lida do cache; nunca alterada,
    apenas substituída por inteiro.
    """
    temperature_kelvin: float
    conditions: Tuple[WeatherCondition, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Aceita lista na construção, mas guarda tupla (imutável e comparável)
        if not isinstance(self.conditions, tuple):
            object.__setattr__(self, 'conditions', tuple(self.conditions))

    @property
    def primary_condition(self) -> Optional[WeatherCondition]:
        """Primeira condição (a única exibida)"""
        return self.conditions[0] if self.conditions else None

    @property
    def description(self) -> str:
        condition = self.primary_condition
        return condition.description if condition else ""

    @property
    def icon_code(self) -> str:
        condition = self.primary_condition
        return condition.icon if condition else ""

    @property
    def icon_category(self) -> IconCategory:
        return icon_category_for(self.icon_code)

    @property
    def temperature(self) -> Temperature:
        return Temperature.from_kelvin(self.temperature_kelvin)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serializa no formato da API OpenWeather

        Returns:
            {"main": {"temp": K}, "weather": [{"description", "icon"}, ...]}
        """
        return {
            'main': {'temp': self.temperature_kelvin},
            'weather': [condition.to_dict() for condition in self.conditions]
        }

    @classmethod
    def from_dict(cls, payload: Any) -> 'WeatherData':
        """
        Constrói WeatherData a partir do formato da API

        Apenas `main.temp` e `weather[].description/icon` são lidos;
        demais campos são ignorados.

        Args:
            payload: Dict decodificado do JSON

        Returns:
            WeatherData

        Raises:
            ValueError: Se algum campo obrigatório falta ou tem tipo errado
        """
        if not isinstance(payload, dict):
            raise ValueError("Payload must be a JSON object")

        main = payload.get('main')
        if not isinstance(main, dict):
            raise ValueError("Missing 'main' object")

        temp = main.get('temp')
        if isinstance(temp, bool) or not isinstance(temp, (int, float)):
            raise ValueError("Missing or non-numeric 'main.temp'")

        try:
            temperature_kelvin = float(temp)
        except OverflowError as e:
            raise ValueError("'main.temp' out of range") from e
        if not math.isfinite(temperature_kelvin):
            raise ValueError("'main.temp' must be finite")

        raw_conditions = payload.get('weather')
        if not isinstance(raw_conditions, list):
            raise ValueError("Missing 'weather' list")

        conditions = []
        for entry in raw_conditions:
            if not isinstance(entry, dict):
                raise ValueError("Invalid 'weather' entry")
            description = entry.get('description')
            icon = entry.get('icon')
            if not isinstance(description, str) or not isinstance(icon, str):
                raise ValueError("'weather' entry requires string 'description' and 'icon'")
            conditions.append(WeatherCondition(description=description, icon=icon))

        return cls(temperature_kelvin=temperature_kelvin, conditions=tuple(conditions))

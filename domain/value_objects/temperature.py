"""
Value Object para temperatura
Encapsula conversões entre escalas e formatação para exibição
"""
from dataclasses import dataclass
from enum import Enum


KELVIN_OFFSET = 273.15


class TemperatureScale(Enum):
    """Escalas de temperatura suportadas"""
    CELSIUS = "°C"
    FAHRENHEIT = "°F"
    KELVIN = "K"


@dataclass(frozen=True)
class Temperature:
    """
    Value Object para temperatura

    Características:
    - Imutável (frozen=True)
    - Conversões automáticas entre escalas
    - Sem validação de zero absoluto: valores da API são exibidos como chegam
    """
    celsius: float

    @property
    def fahrenheit(self) -> float:
        """
        Converte para Fahrenheit

        Returns:
            Temperatura em °F
        """
        return (self.celsius * 9/5) + 32

    @property
    def kelvin(self) -> float:
        """
        Converte para Kelvin

        Returns:
            Temperatura em K
        """
        return self.celsius + KELVIN_OFFSET

    def format(self, scale: TemperatureScale = TemperatureScale.CELSIUS, decimals: int = 2) -> str:
        """
        Formata temperatura na escala especificada

        Args:
            scale: Escala desejada
            decimals: Casas decimais

        Returns:
            String formatada (ex: "26.85°C")
        """
        if scale == TemperatureScale.FAHRENHEIT:
            value = self.fahrenheit
        elif scale == TemperatureScale.KELVIN:
            value = self.kelvin
        else:
            value = self.celsius
        return f"{value:.{decimals}f}{scale.value}"

    def format_display(self) -> str:
        """Linha exibida na tela: "26.85°C | 80.33°F" """
        return (
            f"{self.format(TemperatureScale.CELSIUS)} | "
            f"{self.format(TemperatureScale.FAHRENHEIT)}"
        )

    def __str__(self) -> str:
        return self.format(TemperatureScale.CELSIUS)

    def __float__(self) -> float:
        """Permite conversão para float (retorna Celsius)"""
        return self.celsius

    @classmethod
    def from_fahrenheit(cls, fahrenheit: float) -> 'Temperature':
        """
        Factory method para criar a partir de Fahrenheit

        Args:
            fahrenheit: Temperatura em °F

        Returns:
            Instância de Temperature
        """
        celsius = (fahrenheit - 32) * 5/9
        return cls(celsius=celsius)

    @classmethod
    def from_kelvin(cls, kelvin: float) -> 'Temperature':
        """
        Factory method para criar a partir de Kelvin

        Args:
            kelvin: Temperatura em K

        Returns:
            Instância de Temperature
        """
        return cls(celsius=kelvin - KELVIN_OFFSET)

"""Interactive generator for Expo Router + NativeWind React Native apps."""

__version__ = "0.1.0"

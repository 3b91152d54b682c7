"""KR Bus Craft - translate South Korean bus stops into Minecraft block coordinates."""

__version__ = "0.1.0"

"""zbxexport - export Zabbix host inventory to per-host files."""

__version__ = "0.1.0"

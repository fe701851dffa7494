# Service packages

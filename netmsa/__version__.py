__version__ = "0.1.0"
__title__ = "netmsa"
__authors__ = "NetMSA developers"
__homepage__ = "https://github.com/netmsa/netmsa"
__repo__ = "https://github.com/netmsa/netmsa"

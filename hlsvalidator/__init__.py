####################################
#
# hlsvalidator - HTTP Live Streaming playlist validator
#
# Reads Media and Master playlists (M3U8) from a web server or the local
# disk, checks them against the HLS structural rules and reports every
# problem found with its line number and severity.
#
####################################

__version__ = '3.1.0'

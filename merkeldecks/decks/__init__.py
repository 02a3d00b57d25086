"""Track metadata, a simulated deck player, playlist, track map and mixer."""
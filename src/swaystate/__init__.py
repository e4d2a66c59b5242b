"""Mirror of sway window manager state maintained over its IPC socket."""

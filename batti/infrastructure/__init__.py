"""GLib, Gio and GTK implementations of the interfaces."""

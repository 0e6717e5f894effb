"""Layout, coordinate mapping, ticks and drawing of figures onto surfaces."""
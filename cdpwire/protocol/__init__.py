"""DevTools Protocol commands, events and message parsing."""
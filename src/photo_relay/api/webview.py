"""Companion webview pages."""

WEBVIEW_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Photo Processor</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 1.5rem; }
      .muted { color: #666; }
    </style>
  </head>
  <body>
    <h1>Photo Processor</h1>
    <p id="status" class="muted">Press the button on your glasses to take a photo.</p>
    <p id="task" class="muted"></p>
    <script>
      async function poll() {
        const res = await fetch('/api/processing-status', { credentials: 'include' });
        if (!res.ok) {
          document.getElementById('status').textContent = 'Error: ' + res.status;
          return;
        }
        const data = await res.json();
        if (!data.hasPhoto) {
          return;
        }
        document.getElementById('status').textContent =
          'Photo taken at ' + new Date(data.photoTimestamp).toLocaleTimeString();
        document.getElementById('task').textContent =
          data.taskId ? 'Processing task: ' + data.taskId : 'Waiting for processing...';
      }
      setInterval(poll, 2000);
      poll();
    </script>
  </body>
</html>
"""

NOT_AUTHENTICATED_HTML = """<html>
  <head><title>Photo Processor - Not Authenticated</title></head>
  <body style="font-family: Arial, sans-serif; text-align: center; padding: 50px;">
    <h1>Please open this page from the MentraOS app</h1>
  </body>
</html>
"""

from string import Template
from typing import Sequence

PAGE = Template("""<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>x01 AI Oracle</title>
  <style>
    body { font-family: system-ui, sans-serif; background: #0f172a; color: #e2e8f0; max-width: 760px; margin: 2rem auto; }
    input, select, button { font-size: 1rem; padding: .4rem .6rem; }
    #query { width: 55%; }
    #langInfo { color: #94a3b8; min-height: 1.2em; }
    #priceText { font-size: 1.4rem; margin: .6rem 0; }
    img { width: 100%; background: #fff; border-radius: 8px; }
  </style>
</head>
<body>
  <h1>x01 AI Oracle</h1>
  <div>
    <input id="query" placeholder="Ask in any language, e.g. precio de solana">
    <select id="symbolSelect">$options</select>
    <button id="askBtn">Ask</button>
  </div>
  <p id="langInfo"></p>
  <p id="priceText"></p>
  <img id="priceChart" alt="Price chart" src="/api/chart.png">
  <script>
    const intervalMs = $interval_ms;
    const symbolSelect = document.getElementById('symbolSelect');
    const priceText = document.getElementById('priceText');
    const langInfo = document.getElementById('langInfo');
    const chart = document.getElementById('priceChart');

    function show(quote) {
      symbolSelect.value = quote.symbol;
      priceText.textContent = quote.status;
      chart.src = '/api/chart.png?t=' + Date.now();
    }

    async function post(url, body) {
      const res = await fetch(url, {method: 'POST', headers: {'Content-Type': 'application/json'}, body: JSON.stringify(body)});
      const json = await res.json();
      if (!res.ok) throw new Error(json.detail || res.statusText);
      return json;
    }

    document.getElementById('askBtn').addEventListener('click', async () => {
      const query = document.getElementById('query').value.trim();
      if (!query) { alert('Please type a question (any language).'); return; }
      try {
        const res = await post('/api/ask', {query, current: symbolSelect.value});
        langInfo.textContent = res.lang_info;
        show(res.quote);
      } catch (e) { alert(e.message); }
    });

    symbolSelect.addEventListener('change', async () => {
      try { show(await post('/api/select', {symbol: symbolSelect.value})); } catch (e) { alert(e.message); }
    });

    async function poll() {
      try { show(await (await fetch('/api/state')).json()); } catch (e) { console.warn('state error', e); }
    }
    poll();
    setInterval(poll, intervalMs);
  </script>
</body>
</html>
""")


def render_page(watchlist: Sequence[str], refresh_interval_sec: float) -> str:
    options = "".join(f'<option value="{sym}">{sym}</option>' for sym in watchlist)
    return PAGE.substitute(options=options, interval_ms=int(refresh_interval_sec * 1000))

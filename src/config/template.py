# Dashboard template
DASHBOARD_TEMPLATE = '''
<!DOCTYPE html>
<html lang="{{ lang }}">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Helpful Tools</title>
    <style>
        * {
            margin: 0;
            padding: 0;
            box-sizing: border-box;
        }
        body {
            font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
            background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
            min-height: 100vh;
            color: #333;
        }
        .header {
            text-align: center;
            padding: 40px 20px;
            color: white;
        }
        .header h1 {
            font-size: 3em;
            font-weight: 300;
        }
        .container {
            max-width: 1200px;
            margin: 0 auto;
            padding: 0 20px;
        }
        .locales {
            text-align: center;
            margin-bottom: 30px;
        }
        .locales a {
            color: white;
            margin: 0 6px;
        }
        .tools-grid {
            display: grid;
            grid-template-columns: repeat(auto-fit, minmax(300px, 1fr));
            gap: 20px;
            margin-bottom: 40px;
        }
        .tool-card {
            background: white;
            border-radius: 15px;
            padding: 25px;
            box-shadow: 0 8px 25px rgba(0,0,0,0.1);
        }
        .tool-card h3 {
            color: #2d3748;
            margin-bottom: 10px;
        }
        .tool-card p {
            color: #718096;
            line-height: 1.5;
            margin-bottom: 15px;
        }
        .tool-card code {
            font-size: 0.85em;
            color: #4a5568;
        }
        .tag {
            display: inline-block;
            background: #e3f2fd;
            color: #1565c0;
            padding: 4px 12px;
            border-radius: 20px;
            font-size: 0.8em;
            margin: 2px;
        }
        .empty-state {
            text-align: center;
            padding: 60px 20px;
            color: white;
        }
    </style>
</head>
<body>
    <div class="header">
        <h1>Helpful Tools</h1>
    </div>

    <div class="container">
        <div class="locales">
            {% for locale in locales %}
            <a href="/?lang={{ locale }}">{{ locale }}</a>
            {% endfor %}
        </div>

        {% if tools %}
        <div class="tools-grid">
            {% for tool in tools %}
            <div class="tool-card">
                <h3>{{ tool.icon }} {{ tool.name }}</h3>
                <p>{{ tool.description }}</p>
                <code>POST {{ tool.api }}</code>
                <div>
                    {% for tag in tool.tags[:8] %}
                    <span class="tag">{{ tag }}</span>
                    {% endfor %}
                </div>
            </div>
            {% endfor %}
        </div>
        {% else %}
        <div class="empty-state">
            <h2>No tools enabled</h2>
            <p>Enable tools in config/config.json</p>
        </div>
        {% endif %}
    </div>
</body>
</html>
'''
